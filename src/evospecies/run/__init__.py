from evospecies.run.config import Config

__all__ = ["Config"]
