from abc import ABC, abstractmethod

from ..models.route_network_model import RouteNetworkModel


class SourceInterface(ABC):
    """
    Base interface for all data sources.

    A source reads a dataset from somewhere and builds a RouteNetworkModel.
    All file access happens here, never in the models.
    """

    @abstractmethod
    def load_model(self, strict: bool = False) -> RouteNetworkModel:
        """
        Load the dataset and build the model.

        Args:
            strict: Raise ModelValidationError on data issues instead of logging them

        Returns:
            The built RouteNetworkModel
        """
        pass

    def get_source_name(self) -> str:
        """
        Get the name of this source.

        Returns:
            String identifier for this source
        """
        return self.__class__.__name__.lower()
