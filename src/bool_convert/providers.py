"""
Format providers for culture-sensitive number parsing.

A provider carries the symbols used when reading numbers from text. The
invariant provider is used whenever none is given, so parsing does not depend
on the runtime locale.
"""

from pydantic import BaseModel, ConfigDict, model_validator


class FormatProvider(BaseModel):
    """Number symbols for a single culture."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    decimal_separator: str = "."
    group_separator: str = ","
    positive_sign: str = "+"
    negative_sign: str = "-"
    nan_symbol: str = "NaN"
    positive_infinity_symbol: str = "Infinity"
    negative_infinity_symbol: str = "-Infinity"

    @model_validator(mode="after")
    def validate_symbols(self):
        for field in (
            "decimal_separator",
            "group_separator",
            "positive_sign",
            "negative_sign",
        ):
            if not getattr(self, field):
                raise ValueError(f"Empty symbol - field:{field}")
        if self.decimal_separator == self.group_separator:
            raise ValueError(
                f"Decimal and group separators must differ - separator:{self.decimal_separator}"
            )
        return self


INVARIANT = FormatProvider()

_PROVIDERS: dict[str, FormatProvider] = {}


def register(provider: FormatProvider) -> FormatProvider:
    """Add or replace a provider, keyed by its case-folded name."""
    _PROVIDERS[provider.name.casefold()] = provider
    return provider


def get(name: str | None) -> FormatProvider | None:
    if name is None:
        return None
    return _PROVIDERS.get(name.strip().casefold(), None)


def resolve(provider: FormatProvider | str | None = None) -> FormatProvider:
    """
    Resolve a provider specifier to a FormatProvider.

    Accepts
    - None: the invariant provider
    - FormatProvider: returned unchanged
    - str: a registered culture name, matched case insensitively

    Raises
    - ValueError when a name is not registered
    """
    if provider is None:
        return INVARIANT
    elif isinstance(provider, FormatProvider):
        return provider
    if result := get(str(provider)):
        return result
    raise ValueError(f"Unknown format provider - name:{provider}")


register(INVARIANT)
for _name in ("en-US", "en-GB"):
    register(INVARIANT.model_copy(update={"name": _name}))
for _name in ("de-DE", "es-ES", "it-IT", "pt-BR"):
    register(
        FormatProvider(name=_name, decimal_separator=",", group_separator=".")
    )
register(
    FormatProvider(name="fr-FR", decimal_separator=",", group_separator="\u202f")
)
