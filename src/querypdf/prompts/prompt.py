import re

from pydantic import BaseModel

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class Prompt(BaseModel):
    name: str
    version: str
    description: str
    inputs: dict[str, str]
    template: str

    class Config:
        extra = "forbid"

    def render(self, **values: str) -> str:
        """Substitute ``{{ name }}`` placeholders with ``values``.

        Every declared input must be given and nothing else.
        """
        missing = self.inputs.keys() - values.keys()
        if missing:
            raise ValueError(
                f"Prompt '{self.name}' missing inputs: {', '.join(sorted(missing))}"
            )
        unknown = values.keys() - self.inputs.keys()
        if unknown:
            raise ValueError(
                f"Prompt '{self.name}' got unknown inputs: {', '.join(sorted(unknown))}"
            )
        return _PLACEHOLDER.sub(lambda m: values[m.group(1)], self.template)
