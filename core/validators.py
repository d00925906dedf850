"""
Core Validators

Shared validation functions for all modules.
"""

from typing import Optional, Sequence

from .errors import ValidationError


def validate_token_count(
    estimated_tokens: int,
    max_tokens: int,
    module_name: str = "Module"
) -> None:
    """
    Validate that estimated tokens don't exceed the allowed input budget.

    Args:
        estimated_tokens: Estimated token count for the request
        max_tokens: Maximum tokens allowed for the input
        module_name: Name of the module for error messages

    Raises:
        ValidationError: If tokens exceed the limit
    """
    if estimated_tokens > max_tokens:
        raise ValidationError(
            f"{module_name}: Text contains approximately {estimated_tokens:,} tokens "
            f"which exceeds the maximum allowed limit of {max_tokens:,} tokens. "
            f"Please reduce the text length or split it into smaller chunks."
        )


def validate_text_length(
    text: str,
    max_chars: int,
    module_name: str = "Module"
) -> None:
    """
    Validate that text length doesn't exceed maximum.

    Raises:
        ValidationError: If text length exceeds maximum
    """
    if len(text) > max_chars:
        raise ValidationError(
            f"{module_name}: Text length ({len(text)}) exceeds "
            f"maximum of {max_chars} characters."
        )


def validate_required_field(
    value: Optional[str],
    field_name: str,
    module_name: str = "Module"
) -> None:
    """
    Validate that a required field is not empty.

    Raises:
        ValidationError: If value is None or empty
    """
    if not value or not value.strip():
        raise ValidationError(
            f"{module_name}: {field_name} is required and cannot be empty."
        )


def validate_batch_size(
    items: Sequence,
    max_items: int,
    module_name: str = "Module"
) -> None:
    """
    Validate that a batch is non-empty and within the size limit.

    Raises:
        ValidationError: If the batch is empty or too large
    """
    if not items:
        raise ValidationError(f"{module_name}: Batch must contain at least one text.")
    if len(items) > max_items:
        raise ValidationError(
            f"{module_name}: Batch has {len(items)} texts, "
            f"exceeds maximum of {max_items}."
        )
