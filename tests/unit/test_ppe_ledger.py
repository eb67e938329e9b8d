"""
Unit tests for the PPE stock ledger.
"""
import pytest

from hse_portal.errors import BadRequest, InsufficientStock, InvalidAction, NotFound, StorageCorrupt
from hse_portal.services.ppe_ledger import (
    IssueRequest,
    PpeLedger,
    RestockRequest,
    parse_ppe_action,
)


@pytest.fixture
def ledger(collection_store) -> PpeLedger:
    ledger = PpeLedger(collection_store)
    ledger.add_item({"id": 1, "name": "Helmet", "qty": 10})
    return ledger


@pytest.mark.unit
class TestParsePpeAction:
    def test_no_action_means_new_item(self):
        assert parse_ppe_action({"name": "Gloves", "qty": 4}) is None

    def test_restock(self):
        assert parse_ppe_action({"action": "restock", "id": "1", "qty": "7"}) == RestockRequest(id="1", qty=7)

    def test_issue_defaults_recipient(self):
        assert parse_ppe_action({"action": "issue", "id": 1, "qty": 2}) == IssueRequest(id=1, qty=2, to="")

    def test_whole_number_strings_accepted(self):
        assert parse_ppe_action({"action": "issue", "id": 1, "qty": "3.0"}).qty == 3

    def test_missing_qty_is_zero(self):
        assert parse_ppe_action({"action": "restock", "id": 1}).qty == 0

    def test_unknown_action(self):
        with pytest.raises(InvalidAction):
            parse_ppe_action({"action": "burn", "id": 1})

    @pytest.mark.parametrize("qty", ["lots", -3, True, 2.5, "1.5"])
    def test_bad_quantity(self, qty):
        with pytest.raises(BadRequest):
            parse_ppe_action({"action": "issue", "id": 1, "qty": qty})


@pytest.mark.unit
class TestPpeLedger:
    def test_issue_more_than_stock_is_refused(self, ledger):
        with pytest.raises(InsufficientStock):
            ledger.issue(1, 15, "Line 2")

        assert ledger.items()[0]["qty"] == 10
        assert ledger.logs() == []

    def test_issue_decrements_and_logs_once(self, ledger):
        item = ledger.issue(1, 5, "Sumon")

        assert item["qty"] == 5
        assert ledger.items()[0]["qty"] == 5
        logs = ledger.logs()
        assert len(logs) == 1
        assert logs[0]["qty"] == 5
        assert logs[0]["item"] == "Helmet"
        assert logs[0]["to"] == "Sumon"
        assert logs[0]["date"]

    def test_issue_entire_stock(self, ledger):
        assert ledger.issue("1", 10)["qty"] == 0

    def test_issue_missing_item(self, ledger):
        with pytest.raises(NotFound):
            ledger.issue(404, 1)

    def test_logs_newest_first(self, ledger):
        ledger.issue(1, 1, "A")
        ledger.issue(1, 2, "B")

        assert [entry["to"] for entry in ledger.logs()] == ["B", "A"]

    def test_restock_adds(self, ledger):
        ledger.issue(1, 5)

        assert ledger.restock(1, 7)["qty"] == 12

    def test_restock_item_without_qty(self, ledger):
        ledger.add_item({"id": 2, "name": "Mask"})

        assert ledger.restock("2", 3)["qty"] == 3

    def test_restock_missing_item(self, ledger):
        with pytest.raises(NotFound):
            ledger.restock(404, 7)

    def test_apply_dispatches(self, ledger):
        assert ledger.apply(RestockRequest(id=1, qty=2))["qty"] == 12
        assert ledger.apply(IssueRequest(id=1, qty=2, to="X"))["qty"] == 10


@pytest.mark.unit
class TestPpeStockGuards:
    def test_add_item_stores_numeric_qty(self, ledger):
        item = ledger.add_item({"id": 2, "name": "Gloves", "qty": "10"})

        assert item["qty"] == 10
        assert ledger.issue(2, 5)["qty"] == 5

    def test_add_item_without_qty_starts_at_zero(self, ledger):
        assert ledger.add_item({"id": 2, "name": "Mask"})["qty"] == 0

    @pytest.mark.parametrize("qty", [-5, "many", 1.5])
    def test_add_item_rejects_bad_qty(self, ledger, qty):
        with pytest.raises(BadRequest):
            ledger.add_item({"id": 2, "name": "Gloves", "qty": qty})

        assert [i["id"] for i in ledger.items()] == [1]

    def test_update_item_edits_details(self, ledger):
        item = ledger.update_item("1", {"size": "L"})

        assert item == {"id": 1, "name": "Helmet", "qty": 10, "size": "L"}

    def test_update_item_allows_unchanged_qty(self, ledger):
        assert ledger.update_item(1, {"qty": "10", "size": "M"})["qty"] == 10

    @pytest.mark.parametrize("qty", [-5, 3, "ten"])
    def test_update_item_cannot_move_stock(self, ledger, qty):
        with pytest.raises(BadRequest):
            ledger.update_item(1, {"qty": qty})

        assert ledger.items()[0]["qty"] == 10

    def test_update_missing_item(self, ledger):
        with pytest.raises(NotFound):
            ledger.update_item(404, {"size": "L"})

    def test_bad_stored_qty_is_corrupt(self, ledger, json_store):
        json_store.write("ppe", [{"id": 1, "name": "Helmet", "qty": "lots"}])

        with pytest.raises(StorageCorrupt):
            ledger.issue(1, 1)
        with pytest.raises(StorageCorrupt):
            ledger.restock(1, 1)
