"""
Message definitions using Pydantic.

Public values and ciphertexts cross between the two parties as JSON strings,
standing in for a network channel.
"""

from typing import Literal, Type, TypeVar
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import InvalidParameters, ProtocolError


M = TypeVar("M", bound=BaseModel)


class DomainParameters(BaseModel):
    """Public DH group parameters shared by both parties."""
    model_config = ConfigDict(frozen=True)

    base: int = Field(..., ge=0, description="DH base (generator)")
    modulus: int = Field(..., gt=1, description="DH modulus")

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise InvalidParameters(f"Invalid domain parameters: {e}") from e


class PublicValueMessage(BaseModel):
    """A party's DH public value (base^private mod modulus)."""
    type: Literal["public_value"] = "public_value"
    sender: str
    value: int = Field(..., description="DH public value")


class CiphertextMessage(BaseModel):
    """AES-128-ECB ciphertext sent between parties."""
    type: Literal["ciphertext"] = "ciphertext"
    sender: str
    ct: str = Field(..., description="Base64-encoded AES ciphertext")


class TranscriptEntry(BaseModel):
    """One reported step of an exchange."""
    step: int
    actor: str
    action: str
    detail: str


# Helper functions for serialization

def serialize_message(msg: BaseModel) -> str:
    """Serialize Pydantic message to JSON string."""
    return msg.model_dump_json()


def deserialize_message(json_str: str, model: Type[M]) -> M:
    """
    Parse a JSON string into the given message model.
    
    Raises:
        ProtocolError: If the JSON is malformed or does not match the model
    """
    try:
        return model.model_validate_json(json_str)
    except ValidationError as e:
        raise ProtocolError(f"Malformed {model.__name__}: {e}") from e
