from functools import wraps


class SoftError(Exception):
    pass


class NoWalletsError(SoftError):
    pass


class CredentialError(ValueError):
    pass


class InputValidationError(ValueError):
    pass


class TxError(Exception):
    pass


class RpcError(TxError):
    def __init__(self, method: str, error):
        self.method = method
        self.error = error
        if isinstance(error, dict):
            text = f'{error.get("message")} (code {error.get("code")})'
        else:
            text = str(error)
        super().__init__(f'{method}: {text}')


def have_json(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        r = func(*args, **kwargs)
        try:
            r.json()
        except ValueError:
            raise RpcError(
                method=kwargs.get("method", "rpc"),
                error=f'bad response [{r.status_code}]: {r.text[:200]}'
            ) from None
        return r

    return wrapper
