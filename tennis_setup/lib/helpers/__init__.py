from .docker import (
    require_docker,
    resolve_compose_command,
    get_version,
    load_compose_services,
    compose_up,
    compose_ps,
)
from .file_ops import ensure_data_directory
