"""
API Gateway proxy integration models.

These describe the event a Lambda receives from an HTTP gateway and the
response envelope it must return.
"""

from typing import Any

from pydantic import Field, PrivateAttr, field_validator

from .base import BaseProxyModel

ERROR_BODY = "Error"


class ProxyRequest(BaseProxyModel):
    """Inbound proxy event. Only the query string is used."""

    query_string_parameters: dict[str, str] = Field(
        default_factory=dict,
        alias="queryStringParameters",
        description="Query string parameters; the gateway sends null when empty",
    )

    @field_validator("query_string_parameters", mode="before")
    @classmethod
    def none_to_empty(cls, v: dict[str, str] | None) -> dict[str, str]:
        return v or {}

    def query(self, name: str) -> str:
        """Return a query parameter, or an empty string if it was not sent."""
        return self.query_string_parameters.get(name) or ""


class ProxyResponse(BaseProxyModel):
    """Status code plus serialized body returned to the gateway."""

    status_code: int = Field(alias="statusCode")
    body: str
    headers: dict[str, str] | None = None

    _error: Exception | None = PrivateAttr(default=None)

    @classmethod
    def success(cls, body: str) -> "ProxyResponse":
        return cls(
            status_code=200,
            body=body,
            headers={"Content-Type": "application/json"},
        )

    @classmethod
    def failure(cls, error: Exception) -> "ProxyResponse":
        """Build the generic 400 response, keeping the cause for diagnostics."""
        response = cls(status_code=400, body=ERROR_BODY)
        response._error = error
        return response

    @property
    def error(self) -> Exception | None:
        return self._error

    def to_lambda(self) -> dict[str, Any]:
        """Serialize into the dictionary the Lambda runtime expects."""
        return self.model_dump_wire()
