from datetime import datetime, timezone

import google.cloud.firestore

USERS_COLLECTION = "users"
DEFAULT_ROLE = "staff"


def build_profile(uid: str, email: str | None = None, display_name: str | None = None,
                  now: datetime | None = None) -> dict:
    """Profile document for a newly created account.

    Missing email / display name become empty strings. ``role`` and
    ``onboarded`` are fixed at creation and never taken from the account.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    return {
        "uid": uid,
        "email": email or "",
        "displayName": display_name or "",
        "role": DEFAULT_ROLE,
        "createdAt": now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        "onboarded": False,
    }


def upsert_profile(db: google.cloud.firestore.Client, profile: dict) -> None:
    # set() without merge replaces the whole document; last write wins
    db.collection(USERS_COLLECTION).document(profile["uid"]).set(profile)
