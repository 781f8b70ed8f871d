from dataclasses import dataclass, field


@dataclass(frozen=True)
class ValidationResult:
    errors: tuple[str, ...] = field(default_factory=tuple)

    @property
    def valid(self) -> bool:
        return not self.errors
