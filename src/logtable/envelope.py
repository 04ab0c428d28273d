"""Translate/query endpoint envelopes.

The query form posts a `QueryRequest` and receives a `QueryResponse`; only the
response's ``data`` field is ever projected into a table. These models let a
host validate the envelope once and hand ``data`` straight to `build_table`.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    ValidationError,
    field_validator,
)

from logtable.errors import ResponseError
from logtable.table import build_table

if TYPE_CHECKING:
    from logtable.config import Config
    from logtable.table import Table

ExecMode = Literal["translate", "query"]


class QueryRequest(BaseModel):
    """Body posted to the translate/query endpoint."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    logql: str = Field(min_length=1)
    endpoint: str | None = None
    bearer_token: SecretStr | None = Field(default=None, alias="bearerToken")
    start: str | None = None
    end: str | None = None
    exec_mode: ExecMode = Field(default="translate", alias="execMode")

    @field_validator("logql", mode="before")
    @classmethod
    def strip_logql(cls, v: Any) -> Any:
        """Trim surrounding whitespace so blank queries fail ``min_length``."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("exec_mode", mode="before")
    @classmethod
    def normalize_exec_mode(cls, v: Any) -> Any:
        """Accept any casing; blank means translate-only."""
        if v is None:
            return "translate"
        if isinstance(v, str):
            return v.strip().lower() or "translate"
        return v

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON body as the endpoint expects it (camelCase, no unset fields)."""
        body = self.model_dump(by_alias=True, exclude_none=True)
        if self.bearer_token is not None:
            body["bearerToken"] = self.bearer_token.get_secret_value()
        return body


class QueryResponse(BaseModel):
    """Body returned by the translate/query endpoint."""

    model_config = ConfigDict(extra="allow", frozen=True)

    logsql: str = ""
    data: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """True when the endpoint reported no error."""
        return not self.error


def parse_response(body: str | bytes | bytearray | dict[str, Any]) -> QueryResponse:
    """Validate a response envelope.

    Args:
        body: The decoded JSON mapping, or the raw JSON text/bytes.

    Returns:
        The validated `QueryResponse`.

    Raises:
        ResponseError: If the body is not a JSON object or fails validation.
    """
    if isinstance(body, bytes | bytearray):
        body = bytes(body).decode("utf-8", errors="replace")
    if isinstance(body, str):
        try:
            body = json.loads(body)
        except ValueError as e:
            raise ResponseError(
                f"Response body is not valid JSON: {e}",
                hint="Expected an object like {\"logsql\": ..., \"data\": ...}.",
            ) from e
    if not isinstance(body, dict):
        raise ResponseError(
            f"Response body must be a JSON object, got {type(body).__name__}",
            hint="Expected an object like {\"logsql\": ..., \"data\": ...}.",
        )
    try:
        return QueryResponse.model_validate(body)
    except ValidationError as e:
        fields = tuple(
            ".".join(str(part) for part in err["loc"]) for err in e.errors()
        )
        raise ResponseError(
            f"Invalid response envelope: {e.error_count()} error(s)",
            hint=f"Check fields: {', '.join(fields)}",
            fields=fields,
        ) from e


def table_from_response(
    body: str | bytes | bytearray | dict[str, Any], *, config: Config | None = None
) -> Table:
    """Validate a response envelope and project its ``data`` into a `Table`.

    An envelope carrying ``error`` still projects its ``data`` (usually empty);
    reporting the error is left to the caller via `QueryResponse.ok`.
    """
    response = parse_response(body)
    return build_table(response.data, config=config)
