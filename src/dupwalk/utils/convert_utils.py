"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
Human-readable size conversion for CLI options and reports.
"""
import re

_UNITS = {
    '': 1,
    'B': 1,
    'K': 1024, 'KB': 1024,
    'M': 1024 ** 2, 'MB': 1024 ** 2,
    'G': 1024 ** 3, 'GB': 1024 ** 3,
    'T': 1024 ** 4, 'TB': 1024 ** 4,
}

_SIZE_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([A-Z]*)\s*$")


class ConvertUtils:
    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Format a byte count: 512 -> "512B", 1536 -> "1.50KB".
        """
        if size_bytes < 1024:
            return f"{max(size_bytes, 0)}B"

        value = float(size_bytes)
        for unit in ("KB", "MB", "GB", "TB"):
            value /= 1024
            if value < 1024 or unit == "TB":
                return f"{value:.2f}{unit}"

    @staticmethod
    def human_to_bytes(size_str: str) -> int:
        """
        Parse '1.5GB', '500K', '2048', '10 MB' into bytes.
        Raises ValueError for negative values, unknown units or garbage.
        """
        match = _SIZE_RE.match(size_str.upper())
        if not match:
            raise ValueError(
                f"Invalid size format: '{size_str}'. "
                f"Supported formats: 1.5GB, 500K, 2048, etc."
            )
        number, unit = match.groups()
        if unit not in _UNITS:
            raise ValueError(f"Unknown size unit '{unit}' in '{size_str}'")
        return int(float(number) * _UNITS[unit])

    @staticmethod
    def is_valid_size_format(size_str: str) -> bool:
        try:
            ConvertUtils.human_to_bytes(size_str)
            return True
        except ValueError:
            return False
