import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUTHY_VALUES = {"1", "true", "yes", "on"}
_FALSEY_VALUES = {"0", "false", "no", "off"}

BLACKBOARD_BOLD_ENV = "QUADINT_BLACKBOARD_BOLD"
THETA_NOTATION_ENV = "QUADINT_THETA_NOTATION"


@dataclass(frozen=True)
class DisplayStyle:
    """
    Rendering preferences. Only the string functions read these; arithmetic never does.

    Attributes:
        blackboard_bold: Ring labels in TeX and HTML use blackboard bold (the default)
            rather than plain bold.
        theta_notation: Values of rings with half-integers are written in terms of
            theta = 1/2 + sqrt(d)/2, or omega = -1/2 + sqrt(-3)/2 in Z[omega].
    """
    blackboard_bold: bool = True
    theta_notation: bool = False


DEFAULT_STYLE = DisplayStyle()


def _env_flag(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUTHY_VALUES:
        return True
    if raw in _FALSEY_VALUES:
        return False
    raise ValueError(f"{name}={raw!r} is not a boolean setting")


def style_from_env(environ: Optional[Mapping[str, str]] = None) -> DisplayStyle:
    """
    Build a DisplayStyle from the environment. Meant to be called once at startup.

    Returns:
        DisplayStyle: The style, with defaults for unset variables.

    Raises:
        ValueError: If a variable is set to something that is not a boolean word.
    """
    env: Mapping[str, str] = os.environ if environ is None else environ
    return DisplayStyle(
        blackboard_bold=_env_flag(env, BLACKBOARD_BOLD_ENV, DEFAULT_STYLE.blackboard_bold),
        theta_notation=_env_flag(env, THETA_NOTATION_ENV, DEFAULT_STYLE.theta_notation),
    )
