from pdfgen.config.config_loader import CONFIG_ENV_VAR, ConfigLoader

__all__ = ["CONFIG_ENV_VAR", "ConfigLoader"]
