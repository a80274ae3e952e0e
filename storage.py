from typing import List, Optional

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from errors import StorageUnavailable
from models import HzVaccineResponse
from schemas import HzVaccineResponseOut, InsertHzVaccineResponse


class DatabaseStorage:
    """Acesso à tabela de respostas HZ. Sem update nem delete."""

    def __init__(self, db: Session):
        self.db = db

    def get_hz_vaccine_response(self, response_id: int) -> Optional[HzVaccineResponse]:
        """Buscar resposta por id. Retorna None se não existir."""
        try:
            return self.db.get(HzVaccineResponse, response_id)
        except SQLAlchemyError as e:
            logger.error(f"❌ Erro ao buscar resposta {response_id}: {str(e)}")
            raise StorageUnavailable("Falha ao ler do banco") from e

    def get_all_hz_vaccine_responses(self) -> List[HzVaccineResponse]:
        """Todas as respostas em ordem de inserção."""
        try:
            return self.db.query(HzVaccineResponse).order_by(HzVaccineResponse.id).all()
        except SQLAlchemyError as e:
            logger.error(f"❌ Erro ao listar respostas: {str(e)}")
            raise StorageUnavailable("Falha ao ler do banco") from e

    def create_hz_vaccine_response(self, insert_response: InsertHzVaccineResponse) -> HzVaccineResponseOut:
        """
        Grava a resposta e devolve o registro com o id gerado pelo banco.

        O registro devolvido é montado antes do commit; depois do commit
        nada mais é lido do banco.
        """
        nova_resposta = HzVaccineResponse(**insert_response.model_dump(mode="json"))
        try:
            self.db.add(nova_resposta)
            self.db.flush()  # Gera o ID
            registro = HzVaccineResponseOut.model_validate(nova_resposta)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Erro ao gravar resposta: {str(e)}")
            raise StorageUnavailable("Falha ao gravar no banco") from e
        return registro
