# Cloud Functions for Firebase for Python.
# Deploy with `firebase deploy --only functions`

import firebase_admin
from firebase_admin import initialize_app, firestore
from firebase_functions import identity_fn, logger
import google.cloud.firestore

from profiles import build_profile, upsert_profile


def get_app() -> firebase_admin.App:
    # one Firebase app per process, created on first use
    try:
        return firebase_admin.get_app()
    except ValueError:
        return initialize_app()


def provision_account(user, db: google.cloud.firestore.Client | None = None) -> dict:
    if db is None:
        db = firestore.client(get_app())
    profile = build_profile(user.uid, email=user.email, display_name=user.display_name)
    upsert_profile(db, profile)
    logger.info(f"Provisioned profile for user: {user.uid}")
    return profile


@identity_fn.before_user_created()
def on_user_creation(event: identity_fn.AuthBlockingEvent) -> identity_fn.BeforeCreateResponse | None:
    provision_account(event.data)
    return
