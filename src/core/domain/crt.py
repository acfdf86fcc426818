"""
CRTSystem: система сравнений для китайской теоремы об остатках

Immutable Pydantic модель пары (residues, moduli). Одноразовая: решение
вычисляется вызовом solve(), модель не хранит состояние.
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.math.modular import chinese_remainder_theorem


class CRTSystem(BaseModel):
    """
    Система x ≡ residues[i] (mod moduli[i]).

    Модель проверяет структуру (одинаковая длина, модули >= 1);
    попарную взаимную простоту проверяет chinese_remainder_theorem.
    """

    residues: tuple[int, ...] = Field(..., description="Остатки")
    moduli: tuple[int, ...] = Field(..., description="Модули (>= 1)")

    model_config = {"frozen": True}

    @field_validator("moduli")
    @classmethod
    def validate_moduli_positive(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        for modulus in v:
            if modulus < 1:
                raise ValueError(f"modulus must be >= 1, got {modulus}")
        return v

    @model_validator(mode="after")
    def validate_lengths(self) -> "CRTSystem":
        if len(self.residues) != len(self.moduli):
            raise ValueError(
                f"residues and moduli must have equal length, "
                f"got {len(self.residues)} and {len(self.moduli)}"
            )
        return self

    def solve(self) -> int:
        """
        Единственное решение в [0, Π moduli).

        Raises:
            ArgumentError: Если модули не попарно взаимно просты
        """
        return chinese_remainder_theorem(self.residues, self.moduli)
