from dataclasses import Field, dataclass, fields
from typing import Collection, Dict, Iterable, Tuple, Union, cast

from eth_typing import Address
from eth_utils import decode_hex, encode_hex, to_dict

from triggerable_exits.constants import ADDRESS_SIZE, DEFAULT_PRECOMPILE_ADDRESS
from triggerable_exits.typing import Fee, Gas

ConfigTypes = Union[Fee, Gas, Address, int]
EncodedConfigTypes = Union[str, int]


@to_dict
def _decoder(
    # NOTE: mypy incorrectly thinks `Field` is a generic type
    data: Dict[str, EncodedConfigTypes],
    fields: Collection[Field],  # type: ignore
) -> Iterable[Tuple[str, ConfigTypes]]:
    for field in fields:
        if field.name not in data:
            continue
        elif field.type is Fee:
            yield field.name, Fee(int(data[field.name]))
        elif field.type is Gas:
            yield field.name, Gas(int(data[field.name]))
        elif field.type is Address:
            yield field.name, Address(decode_hex(cast(str, data[field.name])))
        else:
            yield field.name, int(data[field.name])


@dataclass(eq=True, frozen=True)
class ExitConfig:
    # Dequeue limits
    MAX_EXITS_PER_BLOCK: int = 16
    TARGET_EXITS_PER_BLOCK: int = 2
    # Fee market
    MIN_EXIT_FEE: Fee = Fee(1)
    EXIT_FEE_UPDATE_FRACTION: int = 17
    # Refund of overpayment
    EXCESS_RETURN_GAS_STIPEND: Gas = Gas(2300)
    # Owner of the mechanism's storage
    PRECOMPILE_ADDRESS: Address = DEFAULT_PRECOMPILE_ADDRESS

    def __post_init__(self) -> None:
        if self.MAX_EXITS_PER_BLOCK <= 0:
            raise ValueError(
                f"MAX_EXITS_PER_BLOCK must be positive, got {self.MAX_EXITS_PER_BLOCK}"
            )
        if not 0 <= self.TARGET_EXITS_PER_BLOCK <= self.MAX_EXITS_PER_BLOCK:
            raise ValueError(
                f"TARGET_EXITS_PER_BLOCK must be between 0 and MAX_EXITS_PER_BLOCK "
                f"({self.MAX_EXITS_PER_BLOCK}), got {self.TARGET_EXITS_PER_BLOCK}"
            )
        if self.MIN_EXIT_FEE <= 0:
            raise ValueError(f"MIN_EXIT_FEE must be positive, got {self.MIN_EXIT_FEE}")
        if self.EXIT_FEE_UPDATE_FRACTION <= 0:
            raise ValueError(
                f"EXIT_FEE_UPDATE_FRACTION must be positive, got {self.EXIT_FEE_UPDATE_FRACTION}"
            )
        if self.EXCESS_RETURN_GAS_STIPEND < 0:
            raise ValueError(
                f"EXCESS_RETURN_GAS_STIPEND cannot be negative, "
                f"got {self.EXCESS_RETURN_GAS_STIPEND}"
            )
        if len(self.PRECOMPILE_ADDRESS) != ADDRESS_SIZE:
            raise ValueError(
                f"PRECOMPILE_ADDRESS must be {ADDRESS_SIZE} bytes, "
                f"got {len(self.PRECOMPILE_ADDRESS)}"
            )

    @to_dict
    def to_formatted_dict(self) -> Iterable[Tuple[str, EncodedConfigTypes]]:
        for field in fields(self):
            if field.type is Address:
                encoded_value = encode_hex(getattr(self, field.name))
            else:
                encoded_value = getattr(self, field.name)
            yield field.name, encoded_value

    @classmethod
    def from_formatted_dict(cls, data: Dict[str, EncodedConfigTypes]) -> "ExitConfig":
        unknown_keys = set(data) - {field.name for field in fields(cls)}
        if unknown_keys:
            raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown_keys))}")
        # NOTE: mypy does not recognize the kwarg unpacking here...
        return cls(**_decoder(data, fields(cls)))  # type: ignore


MAINNET_CONFIG = ExitConfig()
