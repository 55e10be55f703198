"""Qt validators enforcing shape constraints while the user types."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QLocale, QRegularExpression
from PySide6.QtGui import QDoubleValidator, QValidator

logger = logging.getLogger(__name__)


class TextConstraintValidator(QValidator):
    """``sh:minLength``, ``sh:maxLength`` and ``sh:pattern`` for text input.

    Text over the maximum length is rejected outright.  Text that is too short
    or does not (yet) match the pattern is ``Intermediate`` so typing is never
    blocked half-way.  The empty string is acceptable; requiredness is
    handled by the form, not by the validator.
    """

    def __init__(
        self,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        pattern: Optional[str] = None,
        parent=None,
    ) -> None:
        super().__init__(parent)
        self.min_length = min_length
        self.max_length = max_length
        self.regex: Optional[QRegularExpression] = None
        if pattern:
            regex = QRegularExpression(pattern)
            if regex.isValid():
                self.regex = regex
            else:
                logger.warning("Ignoring invalid pattern %r: %s", pattern, regex.errorString())

    def check(self, text: str) -> QValidator.State:
        if self.max_length is not None and len(text) > self.max_length:
            return QValidator.State.Invalid
        if not text:
            return QValidator.State.Acceptable
        if self.min_length is not None and len(text) < self.min_length:
            return QValidator.State.Intermediate
        # SHACL patterns are unanchored searches
        if self.regex is not None and not self.regex.match(text).hasMatch():
            return QValidator.State.Intermediate
        return QValidator.State.Acceptable

    def validate(self, text: str, pos: int):  # type: ignore[override]
        return self.check(text), text, pos


def number_validator(
    minimum: Optional[float],
    maximum: Optional[float],
    decimals: int,
    parent=None,
) -> QDoubleValidator:
    validator = QDoubleValidator(parent)
    # always "." as decimal separator, matching the xsd lexical space
    validator.setLocale(QLocale.c())
    validator.setNotation(QDoubleValidator.Notation.StandardNotation)
    validator.setDecimals(decimals)
    if minimum is not None:
        validator.setBottom(float(minimum))
    if maximum is not None:
        validator.setTop(float(maximum))
    return validator


__all__ = ["TextConstraintValidator", "number_validator"]
