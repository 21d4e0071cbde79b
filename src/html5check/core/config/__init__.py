from html5check.core.config.main import Html5CheckConfig, ValidatorConfig

__all__ = ["Html5CheckConfig", "ValidatorConfig"]
