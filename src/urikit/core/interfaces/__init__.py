from .templating import TemplateEngineProtocol
from .variables import VariablesProtocol

__all__ = [
    'TemplateEngineProtocol',
    'VariablesProtocol',
]
