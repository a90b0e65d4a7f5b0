from abc import ABC, abstractmethod
from typing import Optional, Type, TypeVar

from pydantic import BaseModel

from payments_client.form import FormValues, encode_params

ResultT = TypeVar("ResultT", bound=BaseModel)


class Backend(ABC):
    """
    Transport used by every resource client.

    Implementations perform one authenticated request per call and decode the
    response into `result_type`, raising payments_client.errors types on failure.
    """

    def call(
        self,
        method: str,
        path: str,
        key: Optional[str],
        params: Optional[BaseModel],
        result_type: Type[ResultT],
    ) -> ResultT:
        """Form-encode `params` and perform the request."""
        return self.call_raw(method, path, key, encode_params(params), params, result_type)

    @abstractmethod
    def call_raw(
        self,
        method: str,
        path: str,
        key: Optional[str],
        form: FormValues,
        params: Optional[BaseModel],
        result_type: Type[ResultT],
    ) -> ResultT:
        """
        Perform the request with already-encoded form values.

        `params` is still passed so header-only settings (idempotency key,
        connected account) can be read from it.
        """

    def close(self) -> None:
        """Release any pooled connections."""
