"""Plaintext credential check for the portal login.

Tokens handed out here are opaque strings and no endpoint validates them;
they exist only so existing front-ends keep working.
"""
import random
import time

from ..errors import Unauthorized

USERS_COLLECTION = "users"


def _now_ms() -> int:
    return int(time.time() * 1000)


def login(store, username, password, *, admin_username="admin", admin_password="admin123") -> dict:
    users = store.read(USERS_COLLECTION)
    user = next(
        (u for u in users if u.get("username") == username and u.get("password") == password),
        None,
    )
    if user is None:
        if username == admin_username and password == admin_password:
            return {"token": f"admintoken-{_now_ms()}", "user": {"username": admin_username, "role": "admin"}}
        raise Unauthorized()

    token = f"token-{_now_ms()}-{random.randint(0, 999999)}"
    return {"token": token, "user": {"username": user.get("username"), "role": user.get("role")}}
