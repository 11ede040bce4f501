"""
Configuration for labeled enum indexing.

The only tunable is what happens when a declared constant has no display
label. The process-wide default comes from the LABELENUM_MISSING_LABEL
environment variable; a single enum type can override it with class keywords.

Policy values:
    - error (default): building the index fails with MalformedEnum
    - passthrough: the constant is indexed without a label and display
      translation returns the raw name or value

Usage:
    from labelenum.config import EnumOptions, resolve_policy

    policy = resolve_policy(EnumOptions(missing_label="passthrough"))
"""

from __future__ import annotations

import logging
import os
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class MissingLabelPolicy(StrEnum):
    """How the index builder treats a declared value without a label."""

    ERROR = "error"
    PASSTHROUGH = "passthrough"


# Environment variable holding the process-wide default policy
MISSING_LABEL_ENV_VAR = "LABELENUM_MISSING_LABEL"

_DEFAULT_POLICY = MissingLabelPolicy.ERROR

_POLICY_ALIASES: dict[str, MissingLabelPolicy] = {
    "": MissingLabelPolicy.ERROR,
    "error": MissingLabelPolicy.ERROR,
    "strict": MissingLabelPolicy.ERROR,
    "fail": MissingLabelPolicy.ERROR,
    "passthrough": MissingLabelPolicy.PASSTHROUGH,
    "pass": MissingLabelPolicy.PASSTHROUGH,
    "ignore": MissingLabelPolicy.PASSTHROUGH,
}


class EnumOptions(BaseModel):
    """
    Per-type indexing options.

    Attributes:
        missing_label: Policy for unlabeled constants. None defers to the
            process default from the environment.
    """

    missing_label: MissingLabelPolicy | None = None

    model_config = ConfigDict(frozen=True, extra="forbid")


def get_default_policy() -> MissingLabelPolicy:
    """Get the process-wide missing label policy from LABELENUM_MISSING_LABEL.

    Returns:
        MissingLabelPolicy: ERROR if the variable is unset, empty, or invalid.

    Examples:
        >>> import os
        >>> os.environ["LABELENUM_MISSING_LABEL"] = "passthrough"
        >>> get_default_policy()
        <MissingLabelPolicy.PASSTHROUGH: 'passthrough'>
    """
    env_value = os.environ.get(MISSING_LABEL_ENV_VAR, "").lower().strip()

    policy = _POLICY_ALIASES.get(env_value)
    if policy is None:
        logger.warning(
            "Unknown %s value '%s'. Valid values: error, passthrough. Defaulting to %s.",
            MISSING_LABEL_ENV_VAR,
            env_value,
            _DEFAULT_POLICY.value,
        )
        return _DEFAULT_POLICY
    return policy


def resolve_policy(options: EnumOptions | None = None) -> MissingLabelPolicy:
    """Determine the effective missing label policy.

    Resolution order:
    1. options.missing_label if explicitly set
    2. LABELENUM_MISSING_LABEL environment default
    """
    if options is not None and options.missing_label is not None:
        return options.missing_label
    return get_default_policy()


__all__ = [
    "MissingLabelPolicy",
    "EnumOptions",
    "MISSING_LABEL_ENV_VAR",
    "get_default_policy",
    "resolve_policy",
]
