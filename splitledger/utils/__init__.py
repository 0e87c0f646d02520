from splitledger.utils.logger import Logging, logs

__all__ = ["Logging", "logs"]
