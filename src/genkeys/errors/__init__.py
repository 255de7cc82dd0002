from genkeys.errors.base import ErrorKind, GenkeysError

__all__ = ["ErrorKind", "GenkeysError"]
