"""
Recording Utilities Package

Exposes shared utility functions for recording operations.
"""

from recording.utils.recording_utils import (
    generate_filename,
    get_free_space_gb,
    parse_ffmpeg_input_formats,
    validate_output_path,
)

# Public API
__all__ = [
    "generate_filename",
    "get_free_space_gb",
    "parse_ffmpeg_input_formats",
    "validate_output_path",
]
