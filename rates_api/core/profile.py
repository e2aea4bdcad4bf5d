"""Profile Record — the fixed identity served at the API root."""

PROFILE: dict[str, str] = {
    "fullname": "Ada Okafor",
    "profession": "Software Engineer",
    "greeting": "Hello, I am Ada",
    "email": "ada.okafor@example.com",
    "phone": "08000000000",
}


def get_profile() -> dict[str, str]:
    """Return a copy of the profile so callers cannot mutate the constant."""
    return dict(PROFILE)
