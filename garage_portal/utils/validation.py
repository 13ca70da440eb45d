"""
Validation utilities for form input.
"""

import re
from typing import List, Optional, Tuple

from ..core.models.booking import BookingDraft


_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MIN_PASSWORD_LENGTH = 6
MAX_NOTE_LENGTH = 500


class ValidationUtils:
    """Validation utilities for login, sign-up and booking forms."""

    @staticmethod
    def validate_email(email: str) -> Tuple[bool, Optional[str]]:
        """
        Validate e-mail format.

        Args:
            email: Address to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not email or not isinstance(email, str):
            return False, "Email é obrigatório"

        if not _EMAIL_RE.match(email.strip()):
            return False, "Email inválido"

        return True, None

    @staticmethod
    def validate_password(password: str) -> Tuple[bool, Optional[str]]:
        if not password:
            return False, "Senha é obrigatória"

        if len(password) < MIN_PASSWORD_LENGTH:
            return False, f"A senha deve ter pelo menos {MIN_PASSWORD_LENGTH} caracteres"

        return True, None

    @staticmethod
    def validate_name(name: str) -> Tuple[bool, Optional[str]]:
        """
        Validate full name.

        Args:
            name: Name to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not name or not isinstance(name, str):
            return False, "Nome é obrigatório"

        name = name.strip()
        if len(name) < 2:
            return False, "Nome muito curto"

        if len(name) > 100:
            return False, "Nome muito longo"

        # Letters (including accented), spaces, apostrophes and hyphens
        if not re.match(r"^[^\W\d_]+(?:[\s'\-][^\W\d_]+)*$", name):
            return False, "Nome contém caracteres inválidos"

        return True, None

    @staticmethod
    def validate_booking_draft(draft: BookingDraft) -> List[str]:
        """
        Validate a booking draft for completeness.

        Args:
            draft: Draft to validate

        Returns:
            List of validation error messages
        """
        errors = []

        if not draft.vehicle:
            errors.append("Selecione o veículo")

        if not draft.service:
            errors.append("Selecione o serviço")

        if not draft.date:
            errors.append("Selecione a data")

        if not draft.time:
            errors.append("Selecione o horário")

        if len(draft.note) > MAX_NOTE_LENGTH:
            errors.append("Observação muito longa")

        return errors

    @staticmethod
    def sanitize_text(text: str) -> str:
        """
        Sanitize free text by removing control characters.

        Args:
            text: Text to sanitize

        Returns:
            Sanitized text
        """
        if not text:
            return ""

        # Remove control characters except newlines and tabs
        text = re.sub(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]", "", text)

        # Normalize whitespace
        text = re.sub(r"[ \t]+", " ", text)

        return text.strip()
