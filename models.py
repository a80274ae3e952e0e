from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# ==================== MODELO DE RESPOSTA HZ ====================

class HzVaccineResponse(Base):
    """Resposta do questionário sobre a vacina de Herpes Zoster."""
    __tablename__ = "hz_vaccine_responses"
    # Garante que ids nunca sejam reutilizados no SQLite
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    sexo = Column(String(20), nullable=False)  # F, M, Outro, Prefere não dizer
    idade = Column(Integer, nullable=False)  # 18-120
    familia_hz = Column(String(3), nullable=False)
    conhece_vacina = Column(String(3), nullable=False)
    aceitou_explicacao = Column(String(3), nullable=False)
    interesse_vacina = Column(String(3), nullable=False)
    interesse_vacinar = Column(String(3), nullable=False)
    vacinou_local = Column(String(3), nullable=False)
    retornar_outro_dia = Column(String(3), nullable=False)
    motivo_nao_vacinar = Column(Text, nullable=True)
    periodo = Column(String(10), nullable=False)  # Manhã, Tarde
    movimento_loja = Column(String(20), nullable=False)  # Movimentada, Pouco movimento

    def __repr__(self):
        return f"<HzVaccineResponse(id={self.id}, sexo={self.sexo}, idade={self.idade})>"
