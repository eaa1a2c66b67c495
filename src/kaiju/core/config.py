from __future__ import annotations

from dataclasses import fields, replace

from kaiju.contracts import GameConfig, ValidationError, ValidationIssue


def default_game_config() -> GameConfig:
    return GameConfig()


def validate_game_config(overrides: dict[str, object] | None = None) -> GameConfig:
    """Build a GameConfig from reference defaults plus overrides.

    Unknown keys and non-integer values are reported together as a
    ValidationError; range problems surface from GameConfig.validate().
    """
    overrides = dict(overrides or {})
    known = {f.name for f in fields(GameConfig)}
    issues: list[ValidationIssue] = []
    for key, value in overrides.items():
        if key not in known:
            issues.append(ValidationIssue("UNKNOWN_CONFIG_KEY", "blocking", f"config.{key}", key, "unknown configuration key"))
        elif isinstance(value, bool) or not isinstance(value, int):
            issues.append(ValidationIssue("CONFIG_NOT_INTEGER", "blocking", f"config.{key}", key, f"expected integer, got {value!r}"))
    if issues:
        raise ValidationError(issues)

    config = replace(default_game_config(), **overrides)
    try:
        config.validate()
    except ValueError as exc:
        raise ValidationError([ValidationIssue("CONFIG_OUT_OF_RANGE", "blocking", "config", "game_config", str(exc))]) from exc
    return config
