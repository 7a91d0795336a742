from .conversion_executor import ConversionExecutor
from .conversion_service import ConversionService

__all__ = ['ConversionExecutor', 'ConversionService']
