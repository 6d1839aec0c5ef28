from .dataset import FeatureStore, get_feature_store
from .elastic_net import ElasticNetRegressor
from .exceptions import InvalidConfigurationError, NumericalInstabilityError
from .optimizer import ElasticNetOptimizer
from .terminator import ConvergenceTerminator, MaxIterTerminator
from .weights import Weights

__all__ = [
    "ConvergenceTerminator",
    "ElasticNetOptimizer",
    "ElasticNetRegressor",
    "FeatureStore",
    "InvalidConfigurationError",
    "MaxIterTerminator",
    "NumericalInstabilityError",
    "Weights",
    "get_feature_store",
]
