from typing import Dict, List, Optional


class RegisterError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> Dict:
        return {"error": str(self)}


class ValidationError(RegisterError):
    status_code = 422

    def __init__(self, errors: List[Dict[str, str]], message: str = "Invalid risk item"):
        super().__init__(message)
        self.errors = errors

    def to_dict(self) -> Dict:
        return {"error": str(self), "fields": self.errors}


class ItemNotFoundError(RegisterError):
    status_code = 404


class StorageError(RegisterError):
    pass
