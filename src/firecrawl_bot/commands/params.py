"""Parameter models and validation for the Firecrawl commands.

Each command accepts a JSON object. The allow-list of a command is the set of
aliases of its model; anything else is rejected before the API is contacted.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Type

from firecrawl.firecrawl import AgentOptions, LocationConfig
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from firecrawl_bot.errors import (
    InvalidFormat,
    InvalidParameterValue,
    MissingRequiredField,
    UnsupportedParameters,
)


class CommandParams(BaseModel):
    model_config = ConfigDict(extra="forbid", alias_generator=to_camel)

    @model_validator(mode="before")
    @classmethod
    def null_means_default(cls, data: Any) -> Any:
        # An explicit null for a known option falls back to its default.
        if isinstance(data, dict):
            allowed = set(cls.allowed_parameters())
            return {k: v for k, v in data.items() if v is not None or k not in allowed}
        return data

    @classmethod
    def check_required(cls, payload: Dict[str, Any]) -> None:
        """Raise MissingRequiredField for the first absent mandatory field."""

    @classmethod
    def allowed_parameters(cls) -> List[str]:
        return [f.alias or name for name, f in cls.model_fields.items()]

    def to_options(self) -> Dict[str, Any]:
        """Keyword arguments for the SDK call, without the target URL(s)."""
        return self.model_dump(exclude={"url"}, exclude_none=True)


class ScrapeParams(CommandParams):
    url: Optional[str] = None
    formats: List[str] = Field(default_factory=lambda: ["markdown"])
    only_main_content: bool = True
    include_tags: Optional[List[str]] = None
    exclude_tags: Optional[List[str]] = None
    headers: Optional[Dict[str, str]] = None
    wait_for: Optional[int] = None
    mobile: bool = False
    skip_tls_verification: bool = False
    timeout: int = 30000
    extract: Optional[Dict[str, Any]] = None
    actions: Optional[List[Dict[str, Any]]] = None
    location: Optional[LocationConfig] = None
    remove_base64_images: Optional[bool] = None
    json_options: Optional[Dict[str, Any]] = None
    agent: Optional[AgentOptions] = None

    @classmethod
    def check_required(cls, payload: Dict[str, Any]) -> None:
        if not payload.get("url"):
            raise MissingRequiredField(
                "scrape", "url", 'The "url" parameter is required for the scrape command.'
            )

    def to_options(self) -> Dict[str, Any]:
        # scrape_url serializes location and agent itself and needs the SDK models
        options = self.model_dump(exclude={"url", "location", "agent"}, exclude_none=True)
        if self.location is not None:
            options["location"] = self.location
        if self.agent is not None:
            options["agent"] = self.agent
        return options


class MapParams(CommandParams):
    url: Optional[str] = None
    search: Optional[str] = None
    ignore_sitemap: bool = True
    sitemap_only: bool = False
    include_subdomains: bool = False
    limit: int = 5000

    @classmethod
    def check_required(cls, payload: Dict[str, Any]) -> None:
        if not payload.get("url"):
            raise MissingRequiredField(
                "map", "url", 'The "url" parameter is required for the map command.'
            )


class ExtractParams(CommandParams):
    urls: Optional[List[str]] = None
    prompt: Optional[str] = None
    # "schema" would shadow BaseModel.schema
    extraction_schema: Optional[Dict[str, Any]] = Field(default=None, alias="schema")
    agent: Optional[Dict[str, Any]] = None

    @classmethod
    def check_required(cls, payload: Dict[str, Any]) -> None:
        urls = payload.get("urls")
        if not isinstance(urls, list) or not urls:
            raise MissingRequiredField(
                "extract", "urls", 'The "urls" parameter is required and must be a non-empty array.'
            )
        if not payload.get("prompt"):
            raise MissingRequiredField(
                "extract", "prompt", 'The "prompt" parameter is required for the extract command.'
            )

    def to_options(self) -> Dict[str, Any]:
        options = self.model_dump(exclude={"urls", "extraction_schema"}, exclude_none=True)
        if self.extraction_schema is not None:
            options["schema"] = self.extraction_schema
        return options


PARAM_MODELS: Dict[str, Type[CommandParams]] = {
    "scrape": ScrapeParams,
    "map": MapParams,
    "extract": ExtractParams,
}


def decode_params(raw: Optional[str]) -> Dict[str, Any]:
    """
    Decode the raw params argument into a dictionary.

    Raises:
        InvalidFormat: If the text is not JSON or not a JSON object
    """
    try:
        parsed = json.loads(raw or "")
    except json.JSONDecodeError as e:
        raise InvalidFormat(details={"error": str(e)}) from e
    if not isinstance(parsed, dict):
        raise InvalidFormat(details={"type": type(parsed).__name__})
    return parsed


def parse_params(command: str, raw: Optional[str]) -> CommandParams:
    """
    Decode and validate the params of a Firecrawl command.

    Checks run in a fixed order: JSON decoding, unknown keys, required fields,
    then value types. The first failing check raises.

    Args:
        command: "scrape", "map" or "extract"
        raw: The JSON text typed by the user

    Returns:
        The validated params model with defaults applied
    """
    model = PARAM_MODELS[command]
    payload = decode_params(raw)

    try:
        params = model.model_validate(payload)
    except ValidationError as e:
        errors = e.errors()
        unsupported = [str(err["loc"][0]) for err in errors if err["type"] == "extra_forbidden"]
        if unsupported:
            raise UnsupportedParameters(command, unsupported) from e
        model.check_required(payload)
        field = ".".join(str(part) for part in errors[0]["loc"])
        raise InvalidParameterValue(field, errors[0]["msg"]) from e

    model.check_required(payload)
    return params
