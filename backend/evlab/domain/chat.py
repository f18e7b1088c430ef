from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal

from evlab.config import DEFAULT_MODEL, DEFAULT_TEMPERATURE, MAX_OUTPUT_TOKENS

Role = Literal["user", "assistant"]


@dataclass(frozen=True)
class ConversationMessage:
    role: Role = "user"
    content: str = ""

    @classmethod
    def from_raw(cls, raw: Any) -> "ConversationMessage":
        """
        Normaliza un mensaje que viene del frontend.
        Cualquier rol distinto de 'assistant' se trata como 'user'.
        """
        if not isinstance(raw, dict):
            return cls()

        role: Role = "assistant" if raw.get("role") == "assistant" else "user"
        content = raw.get("content")
        # contenido falsy (None, "", 0) -> texto vacio
        return cls(role=role, content=str(content) if content else "")

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass
class ChatRequestPayload:
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    messages: List[ConversationMessage] = field(default_factory=list)
    max_tokens: int = MAX_OUTPUT_TOKENS

    def to_upstream(self, system_prompt: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                *(m.to_dict() for m in self.messages),
            ],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }


@dataclass(frozen=True)
class ChatReply:
    reply: str
    model: str

    def to_dict(self) -> Dict[str, str]:
        return {"reply": self.reply, "model": self.model}
