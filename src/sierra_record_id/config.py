"""API settings and conversion context."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

from sierra_record_id.check_digit import CheckDigitFn, calc_check_digit
from sierra_record_id.errors import ConfigurationError
from sierra_record_id.formatting import DEFAULT_API_PATH
from sierra_record_id.parse.patterns import API_HOST_RE, API_PATH_RE
from sierra_record_id.resolver import Resolver

__all__ = [
    "ENV_API_HOST",
    "ENV_API_PATH",
    "ApiSettings",
    "ConversionContext",
]

ENV_API_HOST = "SIERRA_API_HOST"
ENV_API_PATH = "SIERRA_API_PATH"


def is_valid_api_host(api_host: Any) -> bool:
    """Check an API host against the URL host grammar."""
    return isinstance(api_host, str) and API_HOST_RE.fullmatch(api_host) is not None


def is_valid_api_path(api_path: Any) -> bool:
    """Check an API path: starts and ends with ``/``, no empty segments."""
    return (
        isinstance(api_path, str)
        and API_PATH_RE.fullmatch(api_path) is not None
        and "//" not in api_path
    )


@dataclass(frozen=True)
class ApiSettings:
    """Host and path of the Sierra REST API used for absolute URLs.

    Attributes
    ----------
    api_host : str
        Host name, e.g. ``"lib.example.edu"``.
    api_path : str
        Path prefix before the version segment (default: ``/iii/sierra-api/``).
    """

    api_host: str
    api_path: str = DEFAULT_API_PATH

    def __post_init__(self) -> None:
        """Validate host and path."""
        if not is_valid_api_host(self.api_host):
            raise ConfigurationError(f"api_host is invalid: {self.api_host!r}")
        if not is_valid_api_path(self.api_path):
            raise ConfigurationError(f"api_path is invalid: {self.api_path!r}")

    @classmethod
    def resolve(
        cls,
        api_host: str | None = None,
        api_path: str | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> ApiSettings:
        """Build settings from explicit values, falling back to the environment.

        Parameters
        ----------
        api_host : str | None, optional
            Explicit host. Falls back to ``SIERRA_API_HOST``.
        api_path : str | None, optional
            Explicit path. Falls back to ``SIERRA_API_PATH``, then
            ``/iii/sierra-api/``.
        environ : Mapping[str, str] | None, optional
            Environment to read, by default ``os.environ``.

        Returns
        -------
        ApiSettings
            Validated settings.

        Raises
        ------
        ConfigurationError
            If no host is given and ``SIERRA_API_HOST`` is not set, or if the
            host or path is malformed.
        """
        env = os.environ if environ is None else environ
        host = api_host or env.get(ENV_API_HOST)
        if not host:
            raise ConfigurationError(
                f"api_host must be given or {ENV_API_HOST} must be set "
                "to build an absolute API URL"
            )
        path = api_path or env.get(ENV_API_PATH) or DEFAULT_API_PATH
        return cls(api_host=host, api_path=path)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ApiSettings:
        """Build settings from ``SIERRA_API_HOST`` and ``SIERRA_API_PATH`` only."""
        return cls.resolve(environ=environ)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class ConversionContext:
    """Collaborators and defaults shared by a batch of conversions.

    Attributes
    ----------
    api_host : str | None
        Default API host for absolute URLs.
    api_path : str | None
        Default API path for absolute URLs.
    resolver : Resolver | None
        Campus lookup, needed only by the async conversion path.
    check_digit_fn : CheckDigitFn
        Check digit function (default: Sierra MOD-11).
    environ : Mapping[str, str] | None
        Environment for ``SIERRA_API_*`` lookups. None means ``os.environ``.
    """

    api_host: str | None = None
    api_path: str | None = None
    resolver: Resolver | None = None
    check_digit_fn: CheckDigitFn = calc_check_digit
    environ: Mapping[str, str] | None = None

    @classmethod
    def coerce(cls, context: ConversionContext | Mapping[str, Any] | None) -> ConversionContext:
        """Accept a context, a plain mapping of its fields, or None."""
        if context is None:
            return cls()
        if isinstance(context, ConversionContext):
            return context
        return cls(**context)

    def api_settings(self, api_host: str | None = None, api_path: str | None = None) -> ApiSettings:
        """Resolve API settings: arguments, then this context, then the environment."""
        return ApiSettings.resolve(
            api_host=api_host or self.api_host,
            api_path=api_path or self.api_path,
            environ=self.environ,
        )

    def require_resolver(self) -> Resolver:
        """Return the resolver or raise if none was configured.

        Raises
        ------
        ConfigurationError
            If ``resolver`` is None.
        """
        if self.resolver is None:
            raise ConfigurationError(
                "A resolver is required to translate between campus codes and campus ids"
            )
        return self.resolver
