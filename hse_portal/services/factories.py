from ..errors import BadRequest, NotFound

FACTORIES_COLLECTION = "factories"
COUNTERS = ("fire", "firstAid", "manpower")


def fold_factories(rows: list) -> dict:
    """[{name, fire, firstAid, manpower}, ...] -> {name: {fire, firstAid, manpower}}.

    Rows without a name are skipped; missing counters become 0.
    """
    folded = {}
    for row in rows:
        if not isinstance(row, dict) or not row.get("name"):
            continue
        folded[row["name"]] = {c: row.get(c) or 0 for c in COUNTERS}
    return folded


class FactoryBoard:
    def __init__(self, store):
        self.store = store

    def all(self) -> dict:
        return self.store.read(FACTORIES_COLLECTION)

    def replace(self, body) -> dict:
        # names left out of a list body are dropped from the map
        if isinstance(body, list):
            body = fold_factories(body)
        if not isinstance(body, dict):
            raise BadRequest("Factories must be an object or a list")
        self.store.write(FACTORIES_COLLECTION, body)
        return body

    def delete(self, name: str):
        with self.store.locked(FACTORIES_COLLECTION):
            data = self.all()
            if name not in data:
                raise NotFound()
            del data[name]
            self.store.write(FACTORIES_COLLECTION, data)
