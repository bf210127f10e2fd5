"""Configuration profile management.

Selects a configuration profile from the environment.
"""

import os
from enum import Enum

PROFILE_ENV_VAR = "CADENCE_PROFILE"


class Profile(Enum):
    """Available configuration profiles."""

    DEV = "dev"
    PROD = "prod"
    TEST = "test"


def detect_profile() -> Profile:
    """Detect appropriate configuration profile.

    Reads the CADENCE_PROFILE environment variable and falls back to dev.

    Returns:
        Profile enum value
    """
    env_profile = os.environ.get(PROFILE_ENV_VAR, "").strip().lower()
    profile_map = {
        "prod": Profile.PROD,
        "dev": Profile.DEV,
        "test": Profile.TEST,
    }
    return profile_map.get(env_profile, Profile.DEV)


__all__ = [
    "PROFILE_ENV_VAR",
    "Profile",
    "detect_profile",
]
