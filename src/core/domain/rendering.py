"""
Rendering — Текстовое представление комплексного числа

Формат: <re><sign><im>i
- <sign> = "+" если знаковый бит im сброшен (включая +0.0), иначе знак
  несёт сама отформатированная мнимая часть ("-")
- Обе компоненты форматируются одним и тем же спецификатором, поэтому
  width/precision применяются одинаково к re и im

Форматирование самих чисел делегируется встроенному format() Python.
Поддерживаемые типы спецификатора: e E f F g G a A s.

Примеры:
    str(Complex(1.2, 3.4))          → "1.2+3.4i"
    str(Complex(1.2, -3.4))         → "1.2-3.4i"
    format(Complex(1.2, 3.4), ".2f") → "1.20+3.40i"
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Final, Optional

import numpy as np
from pydantic import BaseModel, Field, field_validator, model_validator

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Допустимые символы типа спецификатора
SUPPORTED_FORMAT_CHARS: Final[frozenset] = frozenset("eEfFgGaAs")

# Тип по умолчанию (кратчайшее round-trip представление)
DEFAULT_FORMAT_CHAR: Final[str] = "s"

# [[fill]align][sign][#][0][width][grouping][.precision][type]
_SPEC_RE: Final[re.Pattern] = re.compile(
    r"""
    \A
    (?:(?P<fill>.)?(?P<align>[<>=^]))?
    (?P<sign>[-+ ])?
    (?P<alternate>\#)?
    (?P<zero>0)?
    (?P<width>\d+)?
    (?P<grouping>[,_])?
    (?:\.(?P<precision>\d+))?
    (?P<type>.)?
    \Z
    """,
    re.VERBOSE | re.DOTALL,
)


# =============================================================================
# FORMAT SPEC
# =============================================================================


class FormatSpec(BaseModel):
    """
    Разобранный спецификатор формата компоненты.

    Immutable модель (frozen=True). Строится через FormatSpec.parse().
    """

    fill: Optional[str] = Field(default=None, min_length=1, max_length=1)
    align: Optional[str] = Field(default=None, pattern=r"^[<>=^]$")
    sign: Optional[str] = Field(default=None, pattern=r"^[-+ ]$")
    alternate: bool = False
    zero: bool = False
    width: Optional[int] = Field(default=None, ge=0)
    grouping: Optional[str] = Field(default=None, pattern=r"^[,_]$")
    precision: Optional[int] = Field(default=None, ge=0)
    type: str = Field(default=DEFAULT_FORMAT_CHAR, description="Тип: e E f F g G a A s")

    model_config = {"frozen": True}

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        """Тип должен быть одним из поддерживаемых символов"""
        if v not in SUPPORTED_FORMAT_CHARS:
            raise ValueError(
                f"Unsupported format character {v!r}; "
                f"expected one of {''.join(sorted(SUPPORTED_FORMAT_CHARS))}"
            )
        return v

    @model_validator(mode="after")
    def validate_hex_precision(self) -> "FormatSpec":
        """Шестнадцатеричная форма выводится всегда полностью"""
        if self.type in ("a", "A") and self.precision is not None:
            raise ValueError(
                f"Precision is not supported for format character {self.type!r}"
            )
        return self

    @classmethod
    def parse(cls, spec: str) -> "FormatSpec":
        """
        Разбор строки спецификатора.

        Args:
            spec: Спецификатор в стандартном mini-language (например, ".2f", "+10.3e")

        Returns:
            FormatSpec

        Raises:
            ValueError: Если спецификатор синтаксически неверен или тип
                не поддерживается (pydantic ValidationError — подкласс ValueError)
        """
        match = _SPEC_RE.match(spec)
        if match is None:
            raise ValueError(f"Invalid format specifier: {spec!r}")

        groups = match.groupdict()
        logger.debug("Parsed format specifier %r: %s", spec, groups)
        return cls(
            fill=groups["fill"],
            align=groups["align"],
            sign=groups["sign"],
            alternate=groups["alternate"] is not None,
            zero=groups["zero"] is not None,
            width=int(groups["width"]) if groups["width"] else None,
            grouping=groups["grouping"],
            precision=int(groups["precision"]) if groups["precision"] else None,
            type=groups["type"] or DEFAULT_FORMAT_CHAR,
        )

    def layout(self) -> str:
        """Часть спецификатора без precision и type (fill/align/sign/width)"""
        parts = [
            (self.fill or "") + (self.align or "") if self.align else "",
            self.sign or "",
            "#" if self.alternate else "",
            "0" if self.zero else "",
            str(self.width) if self.width is not None else "",
            self.grouping or "",
        ]
        return "".join(parts)

    def to_builtin(self) -> str:
        """
        Спецификатор для встроенного format().

        Тип "s" с precision эквивалентен "g".
        """
        spec = self.layout()
        if self.precision is not None:
            spec += f".{self.precision}"
        spec += "g" if self.type == "s" else self.type
        return spec


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class RenderConfig:
    """Конфигурация рендеринга Complex."""

    # Спецификатор для str() и format(z, "")
    default_spec: str = DEFAULT_FORMAT_CHAR

    # Суффикс мнимой единицы
    imaginary_unit: str = "i"


# =============================================================================
# FORMATTER
# =============================================================================


def format_component(value, spec: FormatSpec) -> str:
    """
    Форматирование одной компоненты.

    - "s" без precision: кратчайшее round-trip представление (str).
      Это намеренно не %g: 0.1 + 0.2 выводится как 0.30000000000000004,
      а не 0.3, чтобы текст однозначно восстанавливал значение
    - "a"/"A": шестнадцатеричная форма float.hex() (precision не допускается)
    - остальное: встроенный format()

    Для "s" и "a"/"A" флаги fill/align/sign/0/width/grouping применяются
    так же, как встроенный format() применяет их к числам.
    """
    if spec.type == "s" and spec.precision is None:
        return _layout(_shortest(value), spec)
    if spec.type in "aA":
        text = float(value).hex()
        return _layout(text.upper() if spec.type == "A" else text, spec)
    return format(value, spec.to_builtin())


def _shortest(value) -> str:
    # целые значения без хвоста ".0": 1+0i, а не 1.0+0.0i
    if isinstance(value, np.floating) and _is_integral(value):
        return np.format_float_positional(value, trim="-")
    return str(value)


def _is_integral(value) -> bool:
    return bool(np.isfinite(value) and value == np.trunc(value) and abs(value) < 1e16)


def _layout(text: str, spec: FormatSpec) -> str:
    """
    Числовая раскладка готового текста компоненты.

    Знак отделяется от тела, к целой части тела применяется grouping,
    затем padding до width. Флаг "0" без явных fill/align эквивалентен
    fill="0", align="=" (заполнение между знаком и цифрами).
    """
    sign, body = ("-", text[1:]) if text.startswith("-") else ("", text)
    if not sign and spec.sign in ("+", " "):
        sign = spec.sign
    if spec.grouping:
        body = _group(body, spec.grouping)

    pad = (spec.width or 0) - len(sign) - len(body)
    if pad <= 0:
        return sign + body

    fill = spec.fill or ("0" if spec.zero else " ")
    align = spec.align or ("=" if spec.zero else ">")
    if align == "=":
        return sign + fill * pad + body
    if align == "<":
        return sign + body + fill * pad
    if align == "^":
        left = pad // 2
        return fill * left + sign + body + fill * (pad - left)
    return fill * pad + sign + body


def _group(body: str, separator: str) -> str:
    digits = len(body) - len(body.lstrip("0123456789"))
    if digits <= 3:
        return body
    head, tail = body[:digits], body[digits:]
    groups = []
    while head:
        groups.insert(0, head[-3:])
        head = head[:-3]
    return separator.join(groups) + tail


class ComplexFormatter:
    """
    Рендеринг комплексного числа в текст.

    Formatter не знает о типе Complex: принимает компоненты (re, im).
    Это позволяет использовать его и из Complex.__format__, и напрямую.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        """
        Args:
            config: Конфигурация рендеринга (default: RenderConfig())
        """
        self.config = config or RenderConfig()

    def resolve_spec(self, spec: Optional[str]) -> FormatSpec:
        """Пустой или None спецификатор → config.default_spec"""
        return FormatSpec.parse(spec or self.config.default_spec)

    def write(
        self,
        sink: Callable[[str], object],
        re_part,
        im_part,
        spec: Optional[str] = None,
    ) -> None:
        """
        Потоковая запись: sink вызывается для каждого фрагмента.

        Фрагменты: <re>, "+" (если signbit(im) == 0), <im>, <imaginary_unit>.

        Args:
            sink: Приёмник фрагментов (например, list.append или file.write)
            re_part: Действительная часть
            im_part: Мнимая часть
            spec: Спецификатор формата (None → config.default_spec)

        Raises:
            ValueError: Если спецификатор неверен
        """
        parsed = self.resolve_spec(spec)
        im_text = format_component(im_part, parsed)
        sink(format_component(re_part, parsed))
        # при флаге "+" знак уже выведен самим спецификатором
        if not np.signbit(im_part) and parsed.sign != "+":
            sink("+")
        sink(im_text)
        sink(self.config.imaginary_unit)

    def render(self, re_part, im_part, spec: Optional[str] = None) -> str:
        """Рендеринг в строку (см. write)"""
        chunks: list[str] = []
        self.write(chunks.append, re_part, im_part, spec)
        return "".join(chunks)


# Глобальный экземпляр formatter'а (для str/format)
DEFAULT_FORMATTER = ComplexFormatter()
