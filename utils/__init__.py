"""Utils module exports"""

from .formatters import mask_params, to_curl_command, truncate, format_file_list

__all__ = ['mask_params', 'to_curl_command', 'truncate', 'format_file_list']
