"""Application Services"""
from .cache_service import CacheService
from .health_service import HealthService

__all__ = ['CacheService', 'HealthService']
