"""Request-level failures of the CSV upload, rendered as {"error": message}."""
from fastapi import status


class CsvUploadError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Erro ao processar o arquivo CSV."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingFileError(CsvUploadError):
    message = "Arquivo CSV é obrigatório!"


class NoValidRecordsError(CsvUploadError):
    message = "Nenhum dado válido encontrado no arquivo CSV."


class PersistenceError(CsvUploadError):
    """The batch insert failed. The underlying error is chained, never returned."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Erro ao salvar os dados no banco de dados."
