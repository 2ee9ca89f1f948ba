import re

from config import VALIDATION_LIMITS
from exceptions import ValidationException
from models import INPUT_TYPES

class InputValidator:
    """Rejects submissions that must never reach the analysis pipeline."""
    
    CONTROL_CHARS_PATTERN = re.compile(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]')
    WHITESPACE_PATTERN = re.compile(r'\s+')
    
    @staticmethod
    def sanitize_content(input_type: str, content: str) -> str:
        if input_type not in INPUT_TYPES:
            raise ValidationException("inputType", f"unsupported input type '{input_type}'")

        content = InputValidator.CONTROL_CHARS_PATTERN.sub('', content or '').strip()
        if not content:
            raise ValidationException("content", "content cannot be empty")

        limit = VALIDATION_LIMITS.MAX_URL_LENGTH if input_type == "url" else VALIDATION_LIMITS.MAX_CONTENT_LENGTH
        if len(content) > limit:
            raise ValidationException("content", f"content cannot exceed {limit} characters")

        if input_type == "text":
            content = InputValidator.WHITESPACE_PATTERN.sub(' ', content)
        
        return content
