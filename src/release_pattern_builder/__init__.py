"""Release Pattern Builder - compile visual match conditions into regex."""

from release_pattern_builder.logging.config import install_null_handler

__version__ = "0.1.0"

install_null_handler()
