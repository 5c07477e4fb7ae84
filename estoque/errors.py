# estoque/errors.py

NOT_FOUND = "Produto não encontrado"
INTERNAL = "Erro interno no servidor"
ROUTE_NOT_FOUND = "Rota não encontrada"
INVALID_JSON = "JSON inválido"
INVALID_NAME = "Nome inválido"
INVALID_QUANTITY = "Quantidade inválida"
INVALID_PRICE = "Preço inválido"


class ApiError(Exception):
    """
    Base class for errors that are reported to API clients.

    The message is sent verbatim in the response body, so it must never
    carry internal details.
    """

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    status_code = 400


class NotFoundError(ApiError):
    status_code = 404

    def __init__(self, message: str = NOT_FOUND):
        super().__init__(message)


class InternalError(ApiError):
    status_code = 500

    def __init__(self, message: str = INTERNAL):
        super().__init__(message)
