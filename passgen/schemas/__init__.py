# passgen schemas
from passgen.schemas.options import GenerationOptions, build_options
from passgen.schemas.passphrase import PassphraseRequest, PassphraseResponse

__all__ = ["GenerationOptions", "build_options", "PassphraseRequest", "PassphraseResponse"]
