from .demo import SignupFailed, handle_signup, register_user, run_demo  # noqa: F401
from .forms import validate_address, validate_signup  # noqa: F401

__all__ = [
    "SignupFailed",
    "handle_signup",
    "register_user",
    "run_demo",
    "validate_address",
    "validate_signup",
]
