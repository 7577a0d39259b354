from enum import Enum


# 맥주 종류
class BeerType(str, Enum):
    LAGER = "LAGER"
    MALZBIER = "MALZBIER"
    WITBIER = "WITBIER"
    WEISS = "WEISS"
    ALE = "ALE"
    IPA = "IPA"
    STOUT = "STOUT"

    @classmethod
    def parse(cls, value) -> "BeerType":
        """Parse a wire value into a member, ignoring case. Raises ValueError on unknown values."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Beer type must be a string, got {type(value).__name__}")
        try:
            return cls[value.strip().upper()]
        except KeyError:
            allowed = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown beer type '{value}'. Allowed: {allowed}") from None
