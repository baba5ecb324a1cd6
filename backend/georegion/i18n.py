"""Localized messages for error codes returned by the API."""
from typing import Optional

MESSAGES = {
    "en": {
        "region.not_found": "Region not found",
        "region.too_few_coordinates": "Polygon must have at least 4 coordinates",
        "region.not_closed": "Polygon is not closed: first and last coordinates must be equal",
        "region.coordinates_out_of_range": "Coordinates out of range: longitude must be within [-180, 180] and latitude within [-90, 90]",
        "region.unsupported_unit": "Unsupported distance unit: {unit}",
        "region.store_unavailable": "Region storage is temporarily unavailable",
        "region.missing_point": "Provide an address or both longitude and latitude",
        "geocode.not_found": "No address found for the given coordinates",
    },
    "pt": {
        "region.not_found": "Região não encontrada",
        "region.too_few_coordinates": "O polígono deve ter pelo menos 4 coordenadas",
        "region.not_closed": "O polígono não está fechado: a primeira e a última coordenada devem ser iguais",
        "region.coordinates_out_of_range": "Coordenadas fora do intervalo: longitude deve estar em [-180, 180] e latitude em [-90, 90]",
        "region.unsupported_unit": "Unidade de distância não suportada: {unit}",
        "region.store_unavailable": "O armazenamento de regiões está temporariamente indisponível",
        "region.missing_point": "Informe um endereço ou longitude e latitude",
        "geocode.not_found": "Nenhum endereço encontrado para as coordenadas informadas",
    },
}

SUPPORTED_LOCALES = tuple(MESSAGES)


def pick_locale(
    lang: Optional[str],
    accept_language: Optional[str],
    default: str = "pt",
) -> str:
    """Choose a locale from ?lang=, then Accept-Language, then the default."""
    candidates = []
    if lang:
        candidates.append(lang)
    if accept_language:
        # "pt-BR,pt;q=0.9,en;q=0.8" -> ["pt-BR", "pt", "en"]; header order is preference order
        candidates.extend(part.split(";")[0].strip() for part in accept_language.split(","))
    for candidate in candidates:
        base = candidate.lower().split("-")[0]
        if base in MESSAGES:
            return base
    return default if default in MESSAGES else "en"


def translate(code: str, locale: str, **params) -> str:
    """Render the message for ``code``; unknown codes render as the code itself."""
    template = MESSAGES.get(locale, {}).get(code) or MESSAGES["en"].get(code)
    if template is None:
        return code
    try:
        return template.format(**params)
    except KeyError:
        return template
