from .config_manager import RunnerConfig, RunnerConfigManager

__all__ = ["RunnerConfig", "RunnerConfigManager"]
