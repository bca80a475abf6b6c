"""Lists of nominal stems that share grammatical behaviour."""


def _words(text: str) -> tuple[str, ...]:
    return tuple(text.split())


#: 1.1.27 sarvAdIni sarvanAmAni
SARVA_ADI: tuple[str, ...] = _words(
    """
    sarva viSva uBa uBaya qatara qatama anya anyatara itara tvat tva nema
    sama sima pUrva para avara dakziRa uttara apara aDara sva antara
    tyad tad yad etad idam adas eka dvi yuzmad asmad Bavatu~ kim
    """
)

TYAD_ADI: tuple[str, ...] = _words("tyad tad yad etad idam adas eka dvi")

USES_DATARA_DATAMA: tuple[str, ...] = _words(
    "katara yatara tatara ekatara katama yatama tatama ekatama"
)

PRATHAMA_ADI: tuple[str, ...] = _words("praTama carama alpa arDa katipaya")

PURVA_ADI: tuple[str, ...] = _words(
    "pUrva para avara dakziRa uttara apara aDara sva antara"
)