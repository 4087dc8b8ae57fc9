import json
from pathlib import Path
from typing import Callable, Type, TypeVar, Union

from pydantic import BaseModel, RootModel

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_input(
    input_message: str,
    fn_validation: Callable,
    error_message: str = "Invalid input. Please try again.",
    cast: Callable = int,
):
    """Prompt until the user types a value that parses and validates.

    - input_message: prompt shown to the user
    - fn_validation: predicate taking the parsed value and returning True if valid
    - error_message: message displayed on invalid input
    - cast: parser applied to the stripped line (int by default)
    """
    while True:
        raw = input(input_message).strip()
        try:
            result = cast(raw)
        except ValueError:
            result = None
        if result is not None and fn_validation(result):
            return result
        print(error_message)


def load_and_validate(
    data_path: Union[Path, str], model: Type[Union[RootModel, ModelT]]
) -> ModelT:
    """
    Load and validate model data from data_path.
    Returns a validated model instance.
    """
    data_path = Path(data_path)
    if not data_path.exists():
        raise FileNotFoundError(f"Data file not found: {data_path}")

    with data_path.open("r", encoding="utf-8") as f:
        raw_data = json.load(f)
        return model.model_validate(raw_data)
