"""Portuguese word lists used by the token-level sentiment scorer.

Membership is tested against normalized (lowercased, punctuation-free) tokens.
Multi-word entries such as ``"pra caramba"`` never match a single token; they
are kept so the vocabulary stays aligned with the thematic phrase lists.
"""

from __future__ import annotations
from typing import FrozenSet

POSITIVE_WORDS: FrozenSet[str] = frozenset(
    {
        "bom", "boa", "excelente", "ótimo", "ótima", "maravilhoso", "fantástico",
        "perfeito", "perfeita", "amor", "amo", "gosto", "gostei", "adoro", "feliz",
        "alegre", "satisfeito", "satisfeita", "contente", "incrível",
        "impressionante", "surpreendente", "recomendo", "recomendaria",
        "positivo", "positiva", "sucesso", "vencedor", "vitória", "conquista",
        "realização", "prazer", "diversão", "legal", "bacana", "show", "top",
        "demais", "sensacional", "espetacular", "formidável", "genial", "lindo",
        "linda", "bonito", "bonita", "elegante", "sofisticado", "moderno",
        "inovador", "eficiente", "rápido", "fácil", "simples", "prático", "útil",
        "conveniente", "confortável",
    }
)

NEGATIVE_WORDS: FrozenSet[str] = frozenset(
    {
        "ruim", "péssimo", "péssima", "horrível", "terrível", "odioso", "odeio",
        "detesto", "nojo", "triste", "chateado", "chateada", "irritado",
        "irritada", "nervoso", "nervosa", "bravo", "brava", "decepcionado",
        "decepcionada", "frustrado", "frustrada", "insatisfeito", "insatisfeita",
        "problema", "erro", "falha", "defeito", "bug", "lento", "devagar",
        "demorado", "complicado", "difícil", "impossível", "inútil",
        "desnecessário", "caro", "custoso", "desperdício", "não", "nunca",
        "jamais", "nenhum", "nenhuma", "zero", "vazio", "falta", "ausência",
        "cancelar", "desistir", "parar", "abandonar", "sair", "deixar", "largar",
        "esquecer", "feio", "feia", "desagradável", "chato", "chata", "boring",
        "monótono", "repetitivo",
    }
)

NEUTRAL_WORDS: FrozenSet[str] = frozenset(
    {
        "ok", "okay", "normal", "comum", "regular", "médio", "média", "padrão",
        "básico", "básica", "talvez", "pode", "poderia", "seria", "deveria",
        "quem sabe", "possivelmente", "provavelmente", "informação", "dados",
        "fatos", "detalhes", "especificações", "características",
        "funcionalidades", "processo", "procedimento", "método", "sistema",
        "estrutura", "organização", "formato",
    }
)

INTENSIFIERS: FrozenSet[str] = frozenset(
    {
        "muito", "super", "extremamente", "totalmente", "completamente",
        "absolutamente", "bastante", "bem", "demais", "pra caramba",
        "para caramba", "imenso", "enorme",
    }
)

NEGATORS: FrozenSet[str] = frozenset(
    {"não", "nunca", "jamais", "nem", "nenhum", "nenhuma", "nada", "zero"}
)
