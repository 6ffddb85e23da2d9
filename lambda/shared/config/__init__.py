"""Shared configuration"""
from .settings import Settings
from .logger_config import get_logger, logger

__all__ = ['Settings', 'get_logger', 'logger']
