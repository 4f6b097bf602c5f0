# dicepass Pydantic Schemas
from dicepass.schemas.passphrase import PassphraseRequest, PassphraseResponse

__all__ = ["PassphraseRequest", "PassphraseResponse"]
