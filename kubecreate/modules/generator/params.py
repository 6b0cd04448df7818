"""
Generator parameter schema, flag pulling and validation.

A ParameterMap is the untyped form parameters take while they are being
assembled from command-line sources. Generators convert it into a typed
config immediately after validate_params() succeeds.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Sequence

from ...errors import ValidationError

ParameterMap = Dict[str, Any]


@dataclass(frozen=True)
class GeneratorParam:
    """A named generator input, flagged required or optional."""

    name: str
    required: bool = False


def is_zero(value: Any) -> bool:
    """
    Check whether a parameter value counts as absent.

    None, empty strings and empty sequences are absent; False and 0 are
    legitimate values.
    """
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict, set)):
        return len(value) == 0
    return False


def validate_params(specs: Sequence[GeneratorParam], params: Mapping[str, Any]) -> None:
    """
    Validate a parameter map against a generator's declared schema.

    Args:
        specs: Declared parameters
        params: Supplied parameter map; unknown keys are tolerated

    Raises:
        ValidationError: Listing every missing required parameter, in
            declaration order
    """
    missing = [spec.name for spec in specs if spec.required and is_zero(params.get(spec.name))]
    if missing:
        raise ValidationError(missing)


def make_params(flags: Mapping[str, Any], specs: Sequence[GeneratorParam]) -> ParameterMap:
    """
    Pull each declared parameter's value out of the ambient flag state.

    Flags are keyed by their dashed command-line name. Names with no flag
    (or an unset flag) are left out; scalar values are stringified the way
    they would have been typed on the command line.

    Args:
        flags: Flag values, e.g. click's ctx.params with dashes restored
        specs: Declared parameters of the resolved generator

    Returns:
        New parameter map
    """
    result: ParameterMap = {}
    for spec in specs:
        if spec.name not in flags:
            continue
        value = flags[spec.name]
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif not isinstance(value, (str, list, tuple)):
            value = str(value)
        result[spec.name] = value
    return result

