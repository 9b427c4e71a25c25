"""
Validators Utility
Input validation with domain exceptions
"""
import re
from typing import Any, Optional

from domain.constants import Messages
from domain.exceptions import InvalidCepFormatException, MissingCepException


class CepValidator:
    """Validate CEP parameter (NNNNN-NNN ou NNNNNNNN)"""

    PATTERN = re.compile(r"\d{5}-?\d{3}")

    @staticmethod
    def is_valid(cep: Any) -> bool:
        """
        Verifica o formato do CEP

        Args:
            cep: Valor recebido na requisição

        Returns:
            True se casar exatamente com 5 dígitos, hífen opcional e 3 dígitos
        """
        if not isinstance(cep, str):
            return False
        return CepValidator.PATTERN.fullmatch(cep) is not None

    @staticmethod
    def validate(cep: Any) -> str:
        """
        Validate CEP format (sem normalizar: o hífen é mantido)

        Returns:
            The validated CEP, unchanged

        Raises:
            InvalidCepFormatException: If format is invalid
        """
        if not CepValidator.is_valid(cep):
            raise InvalidCepFormatException(
                Messages.INVALID_ZIPCODE,
                details={"cep": cep}
            )
        return cep

    @staticmethod
    def require(cep: Optional[Any], message: str = Messages.CEP_REQUIRED) -> Any:
        """
        Garante que o CEP foi informado (antes da validação de formato)

        Raises:
            MissingCepException: If cep is None or empty string
        """
        if cep is None or cep == "":
            raise MissingCepException(message)
        return cep
