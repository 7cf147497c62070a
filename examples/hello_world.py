"""
tinyprefs — Hello World

Typed preferences over a primitive store. Writes are buffered
until commit(), then land in one atomic batch.
"""

from dataclasses import dataclass, field

from PIL import Image

from tinyprefs import StoreConfig, acquire

# ─── Your types (plain dataclasses — no base class required) ───


@dataclass
class Account:
    email: str
    plan: str = "free"
    seats: int = 1
    features: list[str] = field(default_factory=list)


def main():
    # ──────────────────────────────────────
    #  1. Acquire the process-wide store
    # ──────────────────────────────────────
    prefs = acquire(StoreConfig(type="sqlite", path="hello_prefs.db"))

    # ──────────────────────────────────────
    #  2. Stage writes (chained), then commit
    # ──────────────────────────────────────
    print("=== Primitives ===\n")

    prefs.put_int("age", 30).put_string("name", "Ada").put_string_set(
        "tags", {"math", "engines"}
    ).put_boolean("onboarded", True)
    prefs.commit()

    print(f"  name={prefs.get_string('name')}  age={prefs.get_int('age', 0)}")
    print(f"  tags={sorted(prefs.get_string_set('tags', set()))}")
    print(f"  missing={prefs.get_string('missing', 'fallback')}")

    # ──────────────────────────────────────
    #  3. Objects and lists travel as JSON
    # ──────────────────────────────────────
    print("\n=== Objects ===\n")

    account = Account(email="ada@example.com", plan="pro", seats=3, features=["sso"])
    prefs.put_object("account", account)
    prefs.put_list("history", [account, Account(email="old@example.com")])
    prefs.commit()

    print(f"  account={prefs.get_object('account', Account)}")
    print(f"  history (untyped)={prefs.get_list('history')}")
    print(f"  history (typed)={prefs.get_object('history', list[Account])}")

    # ──────────────────────────────────────
    #  4. Images and locators
    # ──────────────────────────────────────
    print("\n=== Media ===\n")

    prefs.put_image("avatar", Image.new("RGB", (16, 16), (200, 40, 40)))
    prefs.put_locator("avatar_url", "https://example.com/avatars/ada.png")
    prefs.commit()

    avatar = prefs.get_image("avatar")
    print(f"  avatar size={avatar.size if avatar else None}")
    print(f"  avatar host={prefs.get_locator('avatar_url').host}")

    # ──────────────────────────────────────
    #  5. Corrupt data reads as absent
    # ──────────────────────────────────────
    prefs.put_string("broken_avatar", "not an image").commit()
    print(f"  broken avatar={prefs.get_image('broken_avatar')}")

    print("\nKeys: ", prefs.keys())


if __name__ == "__main__":
    main()
