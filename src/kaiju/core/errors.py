from __future__ import annotations

from kaiju.contracts import ForensicArtifact
from kaiju.core.events import make_id, now_utc


class EngineIntegrityError(RuntimeError):
    def __init__(self, artifact: ForensicArtifact) -> None:
        super().__init__(artifact.message)
        self.artifact = artifact


class RerollParseError(ValueError):
    """Reroll selection text could not be understood; the round is asked again."""

    def __init__(self, token: str) -> None:
        super().__init__(f"'{token}' is not a valid die index (1-6)")
        self.token = token


def build_forensic_artifact(
    engine_scope: str,
    error_code: str,
    message: str,
    state_snapshot: dict[str, object],
    context: dict[str, object],
    identifiers: dict[str, str],
    causal_fragment: list[str],
) -> ForensicArtifact:
    return ForensicArtifact(
        artifact_id=make_id("fa"),
        timestamp=now_utc(),
        engine_scope=engine_scope,
        error_code=error_code,
        message=message,
        state_snapshot=state_snapshot,
        context=context,
        identifiers=identifiers,
        causal_fragment=causal_fragment,
    )


def integrity_error(
    engine_scope: str,
    error_code: str,
    message: str,
    *,
    state_snapshot: dict[str, object] | None = None,
    identifiers: dict[str, str] | None = None,
) -> EngineIntegrityError:
    artifact = build_forensic_artifact(
        engine_scope=engine_scope,
        error_code=error_code,
        message=message,
        state_snapshot=state_snapshot or {},
        context={},
        identifiers=identifiers or {},
        causal_fragment=[f"{engine_scope}:{error_code}"],
    )
    return EngineIntegrityError(artifact)
