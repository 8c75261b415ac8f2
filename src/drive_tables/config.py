"""Handler configuration.

Settings are passed explicitly to handlers and the connector:

    config = HandlerConfig(max_json_bytes=1024 * 1024)
    handler = JsonHandler(config=config)

Nothing in the handler layer reads the process environment. The CLI is the
only place that maps environment variables onto options (see
CREDENTIALS_ENV_VAR).
"""

from dataclasses import dataclass

# Upper bound on JSON file content accepted before parsing (10 MiB)
DEFAULT_MAX_JSON_BYTES = 10 * 1024 * 1024

# Environment variable the CLI falls back to for the credentials file
CREDENTIALS_ENV_VAR = "DRIVE_TABLES_CREDENTIALS"


@dataclass(frozen=True)
class HandlerConfig:
    """Tunables shared by all handlers.

    Attributes:
        max_json_bytes: Maximum UTF-8 size of a JSON file before it is parsed.
        json_indent: Indentation used when rewriting JSON files.
        header_end_column: Last column read when fetching a sheet's header row.
        clear_end_column: Last column cleared when a sheet row is deleted.
        inference_sample_size: Rows handed to schema inference by get_table.
    """

    max_json_bytes: int = DEFAULT_MAX_JSON_BYTES
    json_indent: int = 2
    header_end_column: str = "ZZ"
    clear_end_column: str = "ZZ"
    inference_sample_size: int = 100


DEFAULT_CONFIG = HandlerConfig()
