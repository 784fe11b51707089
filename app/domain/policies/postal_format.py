"""PostalFormat — jurisdiction-specific postal code grammars.

Each strategy normalizes raw input to a fixed-length canonical token (uppercase,
no separators), pulls the first postal code out of free text, renders a token
for display and derives the province/state a token belongs to. None of these
raise on malformed input: ``None`` (or ``""`` for regions) is the failure signal.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from app.domain.reference import canada, usa
from app.domain.value_objects.enums import Jurisdiction

_NON_ALNUM = re.compile(r"[^A-Z0-9]")
_SEPARATORS = re.compile(r"[\s\-]")


class PostalFormat(ABC):
    jurisdiction: Jurisdiction
    country_code: str

    @abstractmethod
    def normalize(self, raw: str | None) -> str | None:
        """Canonical token for *raw*, or None if it is not a valid code."""
        ...

    @abstractmethod
    def extract(self, text: str | None) -> str | None:
        """Normalized form of the first postal code found in *text*."""
        ...

    @abstractmethod
    def format(self, token: str | None) -> str | None:
        """Human-readable rendering of a postal code."""
        ...

    @abstractmethod
    def derive_region(self, token: str | None) -> str:
        """Region code implied by the postal prefix, or "" when unknown."""
        ...

    @abstractmethod
    def parse_exact(self, raw: str | None) -> str | None:
        """Canonical token when *raw* is nothing but a postal code and separators."""
        ...

    def parse(self, text: str | None) -> str | None:
        """Postal code typed on its own, else the first one found in free text."""
        return self.parse_exact(text) or self.extract(text)


class CanadianPostalFormat(PostalFormat):
    """``A1A 1A1`` — letter/digit alternating, six characters."""

    jurisdiction = Jurisdiction.CA
    country_code = "CA"

    LENGTH = 6
    _VALID = re.compile(r"^[A-Z]\d[A-Z]\d[A-Z]\d$")
    _IN_TEXT = re.compile(
        r"\b([ABCEGHJ-NPRSTVXY]\d[ABCEGHJ-NPRSTVXY])\s*(\d[ABCEGHJ-NPRSTVXY]\d)\b",
        re.IGNORECASE,
    )

    def normalize(self, raw: str | None) -> str | None:
        token = _NON_ALNUM.sub("", str(raw or "").upper())[: self.LENGTH]
        if len(token) != self.LENGTH or not self._VALID.match(token):
            return None
        return token

    def extract(self, text: str | None) -> str | None:
        match = self._IN_TEXT.search(str(text or ""))
        if not match:
            return None
        return self.normalize(match.group(1) + match.group(2))

    def parse_exact(self, raw: str | None) -> str | None:
        token = _SEPARATORS.sub("", str(raw or "").upper())
        if not self._VALID.match(token):
            return None
        return token

    def format(self, token: str | None) -> str | None:
        normalized = self.normalize(token)
        if not normalized:
            return None
        return f"{normalized[:3]} {normalized[3:]}"

    def derive_region(self, token: str | None) -> str:
        normalized = self.normalize(token)
        if not normalized:
            return ""
        return canada.POSTAL_FIRST_LETTER_REGION.get(normalized[0], "")


class UsZipFormat(PostalFormat):
    """Five-digit ZIP; ZIP+4 input is reduced to its five-digit base."""

    jurisdiction = Jurisdiction.US
    country_code = "US"

    LENGTH = 5
    _IN_TEXT = re.compile(r"(?<![\d-])(\d{5})(?:-\d{4})?(?!\d)")
    _EXACT = re.compile(r"^\s*(\d{5})(?:[\s-]*\d{4})?\s*$")

    def normalize(self, raw: str | None) -> str | None:
        token = _NON_ALNUM.sub("", str(raw or "").upper())
        if not token.isdigit() or len(token) not in (self.LENGTH, self.LENGTH + 4):
            return None
        return token[: self.LENGTH]

    def extract(self, text: str | None) -> str | None:
        match = self._IN_TEXT.search(str(text or ""))
        if not match:
            return None
        return self.normalize(match.group(1))

    def parse_exact(self, raw: str | None) -> str | None:
        match = self._EXACT.match(str(raw or ""))
        if not match:
            return None
        return match.group(1)

    def format(self, token: str | None) -> str | None:
        return self.normalize(token)

    def derive_region(self, token: str | None) -> str:
        normalized = self.normalize(token)
        if not normalized:
            return ""
        prefix = int(normalized[:3])
        for low, high, state in usa.ZIP_PREFIX_RANGES:
            if low <= prefix <= high:
                return state
        return ""


_FORMATS: dict[Jurisdiction, PostalFormat] = {
    Jurisdiction.CA: CanadianPostalFormat(),
    Jurisdiction.US: UsZipFormat(),
}


def get_postal_format(jurisdiction: Jurisdiction | str) -> PostalFormat:
    """Select the postal grammar for a jurisdiction.

    Raises:
        ValueError: if the jurisdiction is not supported.
    """
    if not isinstance(jurisdiction, Jurisdiction):
        jurisdiction = Jurisdiction(jurisdiction.strip().upper())
    return _FORMATS[jurisdiction]
