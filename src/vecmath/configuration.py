from .exceptions import VecMathConfigurationError
from .vector_utils import DEFAULT_COMPARISON_TOLERANCE
import hjson
import logging
from pydantic import BaseModel, Field, ValidationError


logger = logging.getLogger(__name__)


class VectorConfiguration(BaseModel):
    """
    Settings for code built on top of the vector operations.
    Nothing here is global: callers hold an instance and pass its values along explicitly.
    """

    # default absolute tolerance when comparing vectors with VectorUtils.is_close
    comparison_tolerance: float = Field(default=DEFAULT_COMPARISON_TOLERANCE, ge=0.0)

    @staticmethod
    def load(filepath: str) -> "VectorConfiguration":
        """
        :param filepath: hjson (or plain JSON) file holding the configuration fields
        :return: the parsed configuration
        :raises VecMathConfigurationError: if the file cannot be read, parsed, or validated
        """
        configuration_dict: dict
        try:
            with open(filepath, 'r', encoding='utf-8') as infile:
                configuration_file_contents: str = infile.read()
            configuration_dict = hjson.loads(configuration_file_contents)
        except OSError as e:
            message: str = f"Configuration file {filepath} could not be read: {str(e)}"
            logger.error(message)
            raise VecMathConfigurationError(message) from None
        except hjson.HjsonDecodeError as e:
            message: str = f"Configuration file {filepath} is not valid hjson: {str(e)}"
            logger.error(message)
            raise VecMathConfigurationError(message) from None
        if not isinstance(configuration_dict, dict):
            message: str = f"Configuration file {filepath} does not contain an object at its root."
            logger.error(message)
            raise VecMathConfigurationError(message)
        try:
            configuration: VectorConfiguration = VectorConfiguration(**configuration_dict)
        except ValidationError as e:
            message: str = f"Configuration file {filepath} is improperly formatted: {str(e)}"
            logger.error(message)
            raise VecMathConfigurationError(message) from None
        logger.info(f"Loaded vector configuration from {filepath}.")
        return configuration
