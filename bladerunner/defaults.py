"""
Framework Default Values
Sensible defaults for the view layer; override them through the config
repository handed to BladeProvider or through .env
"""

# ============================================================================
# VIEW DEFAULTS
# ============================================================================

DEFAULT_VIEW_PATH = 'resources/views'
DEFAULT_VIEW_COMPILED_PATH = 'storage/views'

# Searched in order; the first match wins
DEFAULT_VIEW_EXTENSIONS = ['blade.html', 'html', 'css']

# Extension -> engine name used by the view factory
DEFAULT_VIEW_ENGINE_EXTENSIONS = {
    'blade.html': 'blade',
    'html': 'file',
    'css': 'file',
}

DEFAULT_HINT_PATH_DELIMITER = '::'
DEFAULT_COMPILED_EXTENSION = '.py'

# ============================================================================
# ENVIRONMENT DEFAULTS
# ============================================================================

ENV_VIEW_PATHS = 'VIEW_PATHS'
ENV_VIEW_COMPILED_PATH = 'VIEW_COMPILED_PATH'

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5
