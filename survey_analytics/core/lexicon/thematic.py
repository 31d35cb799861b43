from __future__ import annotations
from typing import Dict, Literal, Tuple

Theme = Literal["service", "product", "price", "general"]
Intensity = Literal[
    "muito_positivo",
    "positivo",
    "levemente_positivo",
    "neutro",
    "levemente_negativo",
    "negativo",
    "muito_negativo",
]

# Ordered from most positive to most negative; histograms keep this order.
INTENSITY_LEVELS: Tuple[Intensity, ...] = (
    "muito_positivo",
    "positivo",
    "levemente_positivo",
    "neutro",
    "levemente_negativo",
    "negativo",
    "muito_negativo",
)

# Substring keywords per theme. Order matters: matched keywords are reported
# positives first, in this order.
THEME_KEYWORDS: Dict[str, Dict[str, Tuple[str, ...]]] = {
    "service": {
        "positive": (
            "atendimento", "atendente", "suporte", "ajuda", "cordial", "educado",
            "prestativo", "rápido", "eficiente", "gentil", "profissional",
            "competente", "solução", "resolver", "atencioso", "disponível",
            "simpático", "qualidade",
        ),
        "negative": (
            "demora", "demorado", "lento", "mal atendido", "grosso", "rude",
            "incompetente", "despreparado", "ignorou", "não ajudou",
            "péssimo atendimento", "mal educado", "não resolve", "não sabe",
            "transferiu", "desligou",
        ),
    },
    "product": {
        "positive": (
            "produto", "qualidade", "excelente", "bom", "funciona", "durável",
            "resistente", "bonito", "útil", "prático", "fácil", "recomendo",
            "satisfeito", "vale a pena", "superou expectativas", "perfeito",
        ),
        "negative": (
            "defeito", "quebrou", "ruim", "péssimo", "não funciona", "problema",
            "falha", "frágil", "barato", "mal feito", "decepcionante",
            "não serve", "não vale", "arrependido", "devolver", "trocar",
        ),
    },
    "price": {
        "positive": (
            "preço", "barato", "em conta", "acessível", "justo", "vale a pena",
            "bom custo", "benefício", "promoção", "desconto", "oferta",
            "econômico", "compensou", "investimento", "custo baixo",
        ),
        "negative": (
            "caro", "custoso", "alto", "não vale", "superfaturado", "abusivo",
            "exagerado", "salgado", "muito caro", "preço alto", "não compensa",
            "não vale o preço", "overpriced",
        ),
    },
}

# Fallback lists for texts that mention no specific theme.
GENERAL_POSITIVE: Tuple[str, ...] = (
    "bom", "ótimo", "excelente", "gostei", "recomendo", "satisfeito",
)
GENERAL_NEGATIVE: Tuple[str, ...] = (
    "ruim", "péssimo", "não gostei", "problema", "decepcionado", "insatisfeito",
)

VERY_POSITIVE_PHRASES: Tuple[str, ...] = (
    "excelente", "perfeito", "maravilhoso", "fantástico", "incrível",
    "excepcional", "extraordinário", "sensacional", "espetacular",
)
VERY_NEGATIVE_PHRASES: Tuple[str, ...] = (
    "horrível", "terrível", "péssimo", "inaceitável", "revoltante",
    "inadmissível", "absurdo", "ridículo",
)

THEME_LABELS: Dict[str, str] = {
    "service": "Atendimento",
    "product": "Produto",
    "price": "Preço",
    "general": "Geral",
}

INTENSITY_LABELS: Dict[str, str] = {
    "muito_positivo": "Muito Positivo",
    "positivo": "Positivo",
    "levemente_positivo": "Levemente Positivo",
    "neutro": "Neutro",
    "levemente_negativo": "Levemente Negativo",
    "negativo": "Negativo",
    "muito_negativo": "Muito Negativo",
}
