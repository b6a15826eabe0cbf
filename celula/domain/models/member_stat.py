from pydantic import BaseModel


class MemberStat(BaseModel):
    """Contagem de um membro sobre os domingos esperados no período."""
    present: int = 0
    absent: int = 0
    unchecked: int = 0
    rate: int = 0

    @property
    def total(self) -> int:
        return self.present + self.absent + self.unchecked
