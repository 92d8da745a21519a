"""
BigInt — Модель неотрицательного целого произвольной точности

Immutable Pydantic модель. Число хранится как кортеж limbs в основании
10^magnitude, младший limb первым (index 0 = least significant).

Длина (length) не хранится отдельно от limbs, а вычисляется из них,
поэтому пара "массив + длина" не может рассинхронизироваться.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. length >= 1; ноль представлен ровно как limbs == (0,)
2. 0 <= limb < 10^magnitude для каждого limb
3. Старший limb ненулевой (кроме нуля)
4. Экземпляр не изменяется после создания (frozen=True)
"""

from typing import Any

from pydantic import BaseModel, Field, StrictInt, model_validator

from .limb_format import DEFAULT_LIMB_FORMAT, MAX_LIMB_MAGNITUDE, LimbFormat


class BigInt(BaseModel):
    """
    Неотрицательное целое произвольной точности.

    Все операции (add, render) создают новые экземпляры и никогда не
    изменяют существующие.
    """

    limbs: tuple[StrictInt, ...] = Field(
        ..., min_length=1, description="Limbs, младший первым"
    )
    magnitude: StrictInt = Field(
        DEFAULT_LIMB_FORMAT.magnitude,
        ge=1,
        le=MAX_LIMB_MAGNITUDE,
        description="Десятичных цифр в одном limb",
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_limbs(self) -> "BigInt":
        """Проверка диапазона limbs и отсутствия старших нулевых limbs."""
        base = self.limb_format.base
        for i, limb in enumerate(self.limbs):
            if not 0 <= limb < base:
                raise ValueError(f"limb[{i}]={limb} out of range [0, {base})")

        if len(self.limbs) > 1 and self.limbs[-1] == 0:
            raise ValueError(
                f"most significant limb is zero (length={len(self.limbs)}); "
                f"leading zero limbs are not allowed"
            )
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls, fmt: LimbFormat = DEFAULT_LIMB_FORMAT) -> "BigInt":
        """Ноль в заданном формате: один limb со значением 0."""
        return cls(limbs=(0,), magnitude=fmt.magnitude)

    @classmethod
    def from_int(cls, value: int, fmt: LimbFormat = DEFAULT_LIMB_FORMAT) -> "BigInt":
        """
        Конверсия неотрицательного Python int в BigInt.

        Raises:
            TypeError: Если value не int
            ValueError: Если value < 0
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"value must be an int, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"value must be non-negative, got {value}")

        if value == 0:
            return cls.zero(fmt)

        limbs = []
        while value:
            value, limb = divmod(value, fmt.base)
            limbs.append(limb)
        return cls(limbs=tuple(limbs), magnitude=fmt.magnitude)

    # -------------------------------------------------------------------------
    # Доступ
    # -------------------------------------------------------------------------

    @property
    def length(self) -> int:
        """Количество limbs."""
        return len(self.limbs)

    @property
    def limb_format(self) -> LimbFormat:
        return LimbFormat(self.magnitude)

    @property
    def is_zero(self) -> bool:
        return self.limbs == (0,)

    def limb(self, index: int) -> int:
        """
        Limb по индексу; за пределами length читается как 0.

        Используется при сложении операндов разной длины: короткий операнд
        не дополняется в хранении, только при чтении.

        Raises:
            IndexError: Если index < 0
        """
        if index < 0:
            raise IndexError(f"limb index must be non-negative, got {index}")
        if index >= len(self.limbs):
            return 0
        return self.limbs[index]

    def to_int(self) -> int:
        """Значение как Python int (для диагностики и тестов)."""
        base = self.limb_format.base
        value = 0
        for limb in reversed(self.limbs):
            value = value * base + limb
        return value

    def to_contract(self) -> dict[str, Any]:
        """JSON-совместимый dict (contracts/schema/big_int.json)."""
        return self.model_dump(mode="json")
