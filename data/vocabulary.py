"""
Static Kriol/Portuguese vocabulary compiled from bilingual dictionaries.

The two direction tables are maintained independently: an entry in
PT_TO_KRIOL does not imply its reverse exists in KRIOL_TO_PT.
See VocabularyService.find_direction_gaps() for the consistency report.
"""

from typing import List, Sequence, Tuple

from models.vocabulary import ExamplePair, VocabularyEntry, PhraseEntry


def _entries(target_lang: str, rows: Sequence[tuple]) -> Tuple[VocabularyEntry, ...]:
    """Build immutable entries from (word, translation, variations, examples, category, frequency) rows"""
    return tuple(
        VocabularyEntry(
            word=word,
            translation=translation,
            variations=tuple(variations),
            target_lang=target_lang,
            examples=tuple(ExamplePair(original=o, translated=t) for o, t in examples),
            category=category,
            frequency=frequency,
        )
        for word, translation, variations, examples, category, frequency in rows
    )


def _entry(word: str, translation: str, variations: List[str],
           examples: List[Tuple[str, str]], category: str, frequency: int) -> tuple:
    return word, translation, variations, examples, category, frequency


# Portuguese → Kriol
PT_TO_KRIOL = _entries("kriol", [
    _entry("aba", "kapa", ["capa"], [("A aba do meu chapéu é branca", "Kapa di ña tchapeu i branku")], "substantivo", 10),
    _entry("abacate", "abakati", [], [("Comi abacate hoje", "N' kume abakati aos")], "substantivo", 5),
    _entry("abacaxi", "ananas", [], [("Suco de abacaxi é saboroso", "Sumu di ananas sabi")], "substantivo", 8),
    _entry("abaixar", "djungutu", [], [("O menino se abaixou para pegar a fruta", "Mininu djungutu pa paña fruta")], "verbo", 12),
    _entry("abaixo", "bas di", [], [("O sapato está debaixo da cama", "Sapatu sta bas di kama")], "advérbio", 20),
    _entry("abandonado", "bandonadu", [], [("O filho da minha tia foi abandonado", "Fidju di ña tia bandonadu")], "adjetivo", 7),
    _entry("abandonar", "bandona", [], [("Não os abandones", "Ka bu bandona elis")], "verbo", 15),
    _entry("abater", "bati", ["mata"], [("Matar os animais para comer ou vender", "Bati limarias pa bai kume o bindi")], "verbo", 9),
    _entry("abdômen", "bariga", [], [("O abdômen de alguém", "Bariga di algin")], "substantivo", 18),
    _entry("abelha", "bagera", [], [("Abelha que tem colmeia", "Bagera ki ta tene kumbu di mel")], "substantivo", 6),
    _entry("abençoar", "bensua", ["abensua"], [("Os velhos abençoam o meu filho", "Garandis bensua ña fidju")], "verbo", 11),
    _entry("abertura", "abertura", ["braku"], [("A abertura da porta é larga", "Abertura di porta largu")], "substantivo", 8),
    _entry("abóbora", "bobra", ["abobra"], [("Cozinhar a abóbora para comer", "Kusiña bobra pa kume")], "substantivo", 7),
    _entry("aborrecer", "burisi", ["nerva", "satia"], [("A minha mãe aborrece o meu pai", "Ña mame ta burisi ña pape")], "verbo", 13),
    _entry("aborrecido", "nervozu", ["burisidu"], [("Estou aborrecido com o resultado", "N'sta nervozu ku ruzultadu")], "adjetivo", 10),
    _entry("abortar", "tira bariga", ["dismantcha bariga"], [("A moça abortou", "Badjuda tira bariga")], "verbo", 4),
    _entry("abraçar", "barsa", ["ngoti"], [("Abracei o meu amigo", "N' barsa ña amigu")], "verbo", 16),
    _entry("abrigar", "moranta", ["abriga", "gasidja"], [("Abriguei a minha namorada", "N' moranta ña badjuda")], "verbo", 5),
    _entry("abrigo", "abrigu", ["kau di sukundi"], [("Precisamos de um abrigo na selva", "No misti kau di sukundi na matu")], "substantivo", 6),
    _entry("abril", "abril", [], [("O mês de abril está quente este ano", "Mis di abril kinti es anu")], "substantivo", 12),
    _entry("abrir", "yabri", ["abri"], [("Abra a porta para eu entrar", "Abri porta pa n' yentra")], "verbo", 45),
    _entry("casa", "kasa", ["kaza"], [("A minha casa é bonita", "Ña kasa bonitu")], "substantivo", 100),
    _entry("homem", "omi", ["homi", "omis"], [("O homem trabalha", "Omi ta tarbadja")], "substantivo", 85),
    _entry("mulher", "mindjer", ["minjer", "mudjer"], [("A mulher cozinha", "Mindjer ta kusiña")], "substantivo", 80),
    _entry("criança", "mininu", ["mininu-mininu"], [("A criança brinca", "Mininu ta brinka")], "substantivo", 70),
    _entry("água", "agu", ["afo"], [("Beber água", "Bibi agu")], "substantivo", 90),
    _entry("comida", "bianda", ["kumida"], [("A comida está pronta", "Bianda pronto")], "substantivo", 75),
    _entry("trabalho", "tarbadju", ["trabalho"], [("Vou ao trabalho", "N' bai na tarbadju")], "substantivo", 65),
    _entry("amigo", "amigu", [], [("Meu amigo chegou", "Ña amigu tchiga")], "substantivo", 60),
    _entry("família", "familia", [], [("A minha família é grande", "Ña familia grandi")], "substantivo", 55),
    _entry("mãe", "mame", ["mama"], [("A minha mãe", "Ña mame")], "substantivo", 88),
    _entry("pai", "pape", ["papa"], [("O meu pai", "Ña pape")], "substantivo", 85),
    _entry("filho", "fidju", [], [("O meu filho", "Ña fidju")], "substantivo", 70),
    _entry("olá", "ola", ["oi"], [("Olá, como estás?", "Ola, kuma ku bu sta?")], "interjeição", 95),
    _entry("bom dia", "bon dia", [], [("Bom dia para todos", "Bon dia pa tudu")], "interjeição", 90),
    _entry("obrigado", "obrigadu", [], [("Muito obrigado", "Obrigadu tchiu")], "interjeição", 88),
    _entry("sim", "sin", [], [("Sim, eu vou", "Sin, n' na bai")], "advérbio", 95),
    _entry("não", "ka", [], [("Não quero", "N' ka kre")], "advérbio", 98),
    _entry("comer", "kume", [], [("Vou comer", "N' na kume")], "verbo", 85),
    _entry("beber", "bibi", [], [("Beber água", "Bibi agu")], "verbo", 80),
    _entry("dormir", "durmi", [], [("Vou dormir", "N' na durmi")], "verbo", 75),
    _entry("ir", "bai", [], [("Eu vou", "N' na bai")], "verbo", 92),
    _entry("vir", "bin", [], [("Ele veio", "I bin")], "verbo", 88),
    _entry("falar", "papia", [], [("Falar Crioulo", "Papia Kriol")], "verbo", 82),
    _entry("ver", "odja", [], [("Eu vi", "N' odja")], "verbo", 78),
    _entry("bonito", "bonitu", ["bunitu"], [("É bonito", "I bonitu")], "adjetivo", 65),
    _entry("grande", "grandi", [], [("A casa é grande", "Kasa grandi")], "adjetivo", 70),
    _entry("pequeno", "pekenu", ["pikinu"], [("O menino é pequeno", "Mininu pekenu")], "adjetivo", 68),
    _entry("bom", "bon", [], [("É bom", "I bon")], "adjetivo", 90),
    _entry("mau", "mau", [], [("É mau", "I mau")], "adjetivo", 60),
    _entry("dia", "dia", [], [("Bom dia", "Bon dia")], "substantivo", 85),
    _entry("noite", "noti", [], [("Boa noite", "Bon noti")], "substantivo", 80),
    _entry("sol", "sol", [], [("O sol está forte", "Sol forti")], "substantivo", 55),
    _entry("chuva", "tchuba", [], [("A chuva caiu", "Tchuba kai")], "substantivo", 50),
    _entry("terra", "tera", ["tchon"], [("A minha terra", "Ña tera")], "substantivo", 60),
    _entry("mar", "mar", [], [("O mar é azul", "Mar azul")], "substantivo", 45),
    _entry("peixe", "pis", ["pixi"], [("Comer peixe", "Kume pis")], "substantivo", 65),
    _entry("arroz", "aros", [], [("Arroz com peixe", "Aros ku pis")], "substantivo", 75),
    _entry("pão", "pan", [], [("Comer pão", "Kume pan")], "substantivo", 60),
    _entry("dinheiro", "pataka", ["dinheru"], [("Preciso de dinheiro", "N' misti pataka")], "substantivo", 70),
    _entry("escola", "skola", [], [("Ir à escola", "Bai skola")], "substantivo", 65),
    _entry("livro", "libru", [], [("Ler o livro", "Lidji libru")], "substantivo", 55),
    _entry("rua", "rua", ["strada"], [("Na rua", "Na rua")], "substantivo", 50),
    _entry("carro", "karu", [], [("O meu carro", "Ña karu")], "substantivo", 55),
    _entry("barco", "barku", [], [("O barco é grande", "Barku grandi")], "substantivo", 45),
    _entry("querer", "kre", [], [("Eu quero", "N' kre")], "verbo", 90),
    _entry("poder", "pudi", [], [("Eu posso", "N' pudi")], "verbo", 85),
    _entry("saber", "sibi", [], [("Eu sei", "N' sibi")], "verbo", 80),
    _entry("ter", "tene", [], [("Eu tenho", "N' tene")], "verbo", 92),
    _entry("ser", "i", [], [("É bom", "I bon")], "verbo", 98),
    _entry("estar", "sta", [], [("Estou bem", "N' sta bon")], "verbo", 95),
    _entry("fazer", "fasi", [], [("Fazer comida", "Fasi bianda")], "verbo", 88),
    _entry("dar", "da", [], [("Dar comida", "Da bianda")], "verbo", 85),
    _entry("amor", "amor", [], [("Eu te amo", "N' ta ama-u")], "substantivo", 70),
    _entry("coração", "kurason", [], [("Meu coração", "Ña kurason")], "substantivo", 55),
    _entry("vida", "bida", [], [("A vida é boa", "Bida bon")], "substantivo", 65),
    _entry("saúde", "saúdi", [], [("Boa saúde", "Bon saúdi")], "substantivo", 60),
    _entry("como", "kuma", [], [("Como estás?", "Kuma ku bu sta?")], "advérbio", 85),
    _entry("onde", "undi", [], [("Onde estás?", "Undi ku bu sta?")], "advérbio", 80),
    _entry("quando", "kantu", [], [("Quando vens?", "Kantu ku bu na bin?")], "advérbio", 75),
    _entry("porque", "pabia", ["pamodi"], [("Porque é assim", "Pabia i sin")], "conjunção", 82),
    _entry("mas", "mas", [], [("Mas eu quero", "Mas n' kre")], "conjunção", 88),
    _entry("e", "i", ["ku"], [("Eu e tu", "Mi ku bo")], "conjunção", 95),
    _entry("eu", "n'", ["ami"], [("Eu sou", "N' i")], "pronome", 98),
    _entry("tu", "bu", ["bo"], [("Tu és", "Bu i")], "pronome", 95),
    _entry("ele", "i", ["el"], [("Ele é", "I i")], "pronome", 92),
    _entry("nós", "no", ["anos"], [("Nós somos", "No i")], "pronome", 88),
    _entry("vocês", "bos", [], [("Vocês são", "Bos i")], "pronome", 85),
    _entry("eles", "elis", [], [("Eles são", "Elis i")], "pronome", 82),
    _entry("acalmar", "kalma", ["toma ton"], [("Acalme-se, vai dar certo", "Kalma, i na da sertu")], "verbo", 25),
    _entry("acariciar", "da kariñu", ["karisia", "ngodu"], [("Acaricia a sua namorada", "Da bu badjuda kariñu")], "verbo", 15),
    _entry("acaso", "akazu", [], [("Minha mãe chegou por acaso", "Ña mame tchiga pur akazu")], "substantivo", 18),
    _entry("aceitação", "setason", [], [("A aceitação dele na aldeia é boa", "Si setason i bon na tabanka")], "substantivo", 12),
    _entry("aceitar", "seta", [], [("Tu deves aceitar a verdade", "Bu dibi di seta bardadi")], "verbo", 35),
    _entry("acenar", "sana", [], [("Acena a mão para as pessoas", "Sana djintis mon")], "verbo", 10),
    _entry("acender", "sindi", ["peganda"], [("Acenda o fogo para cozinhar", "Sindi fugu pa kusiña bianda")], "verbo", 28),
    _entry("acertar", "serta", [], [("Acerta quem está ganhando", "Serta kin ki na gaña")], "verbo", 20),
    _entry("aceso", "sindidu", ["sezu"], [("A luz está acesa no quarto", "Lus sindidu na kuartu")], "adjetivo", 15),
    _entry("achar", "odja", ["otcha"], [("Achei o meu sapato", "N' odja ña sapatu")], "verbo", 55),
])

# Kriol → Portuguese (reverse mapping with additional entries)
KRIOL_TO_PT = _entries("pt", [
    _entry("kasa", "casa", ["kaza"], [("Ña kasa bonitu", "A minha casa é bonita")], "substantivo", 100),
    _entry("omi", "homem", ["homi", "omis"], [("Omi ta tarbadja", "O homem trabalha")], "substantivo", 85),
    _entry("mindjer", "mulher", ["minjer", "mudjer"], [("Mindjer ta kusiña", "A mulher cozinha")], "substantivo", 80),
    _entry("mininu", "criança", ["mininu-mininu"], [("Mininu ta brinka", "A criança brinca")], "substantivo", 70),
    _entry("agu", "água", ["afo"], [("Bibi agu", "Beber água")], "substantivo", 90),
    _entry("bianda", "comida", ["kumida"], [("Bianda pronto", "A comida está pronta")], "substantivo", 75),
    _entry("tarbadju", "trabalho", [], [("N' bai na tarbadju", "Vou ao trabalho")], "substantivo", 65),
    _entry("amigu", "amigo", [], [("Ña amigu tchiga", "Meu amigo chegou")], "substantivo", 60),
    _entry("familia", "família", [], [("Ña familia grandi", "A minha família é grande")], "substantivo", 55),
    _entry("mame", "mãe", ["mama"], [("Ña mame", "A minha mãe")], "substantivo", 88),
    _entry("pape", "pai", ["papa"], [("Ña pape", "O meu pai")], "substantivo", 85),
    _entry("fidju", "filho", [], [("Ña fidju", "O meu filho")], "substantivo", 70),
    _entry("papia", "falar", [], [("Papia Kriol", "Falar Crioulo")], "verbo", 82),
    _entry("kume", "comer", [], [("N' na kume", "Vou comer")], "verbo", 85),
    _entry("bibi", "beber", [], [("Bibi agu", "Beber água")], "verbo", 80),
    _entry("durmi", "dormir", [], [("N' na durmi", "Vou dormir")], "verbo", 75),
    _entry("bai", "ir", [], [("N' na bai", "Eu vou")], "verbo", 92),
    _entry("bin", "vir", [], [("I bin", "Ele veio")], "verbo", 88),
    _entry("odja", "ver", [], [("N' odja", "Eu vi")], "verbo", 78),
    _entry("kre", "querer", [], [("N' kre", "Eu quero")], "verbo", 90),
    _entry("pudi", "poder", [], [("N' pudi", "Eu posso")], "verbo", 85),
    _entry("sibi", "saber", [], [("N' sibi", "Eu sei")], "verbo", 80),
    _entry("tene", "ter", [], [("N' tene", "Eu tenho")], "verbo", 92),
    _entry("sta", "estar", [], [("N' sta bon", "Estou bem")], "verbo", 95),
    _entry("fasi", "fazer", [], [("Fasi bianda", "Fazer comida")], "verbo", 88),
    _entry("da", "dar", [], [("Da bianda", "Dar comida")], "verbo", 85),
    _entry("bon", "bom", [], [("I bon", "É bom")], "adjetivo", 90),
    _entry("grandi", "grande", [], [("Kasa grandi", "A casa é grande")], "adjetivo", 70),
    _entry("pekenu", "pequeno", ["pikinu"], [("Mininu pekenu", "O menino é pequeno")], "adjetivo", 68),
    _entry("bonitu", "bonito", ["bunitu"], [("I bonitu", "É bonito")], "adjetivo", 65),
    _entry("sin", "sim", [], [("Sin, n' na bai", "Sim, eu vou")], "advérbio", 95),
    _entry("ka", "não", [], [("N' ka kre", "Não quero")], "advérbio", 98),
    _entry("tcheu", "muito", ["tchiu"], [("Obrigadu tcheu", "Muito obrigado")], "advérbio", 85),
    _entry("kuma", "como", [], [("Kuma ku bu sta?", "Como estás?")], "advérbio", 85),
    _entry("undi", "onde", [], [("Undi ku bu sta?", "Onde estás?")], "advérbio", 80),
    _entry("kantu", "quando", [], [("Kantu ku bu na bin?", "Quando vens?")], "advérbio", 75),
    _entry("pabia", "porque", ["pamodi"], [("Pabia i sin", "Porque é assim")], "conjunção", 82),
    _entry("tabanka", "aldeia", [], [("Na ña tabanka", "Na minha aldeia")], "substantivo", 55),
    _entry("tchon", "chão/terra", [], [("Na tchon", "No chão")], "substantivo", 60),
    _entry("sol", "sol", [], [("Sol forti", "O sol está forte")], "substantivo", 55),
    _entry("tchuba", "chuva", [], [("Tchuba kai", "A chuva caiu")], "substantivo", 50),
    _entry("pis", "peixe", ["pixi"], [("Kume pis", "Comer peixe")], "substantivo", 65),
    _entry("aros", "arroz", [], [("Aros ku pis", "Arroz com peixe")], "substantivo", 75),
    _entry("pataka", "dinheiro", [], [("N' misti pataka", "Preciso de dinheiro")], "substantivo", 70),
    _entry("skola", "escola", [], [("Bai skola", "Ir à escola")], "substantivo", 65),
    _entry("libru", "livro", [], [("Lidji libru", "Ler o livro")], "substantivo", 55),
    _entry("karu", "carro", [], [("Ña karu", "O meu carro")], "substantivo", 55),
    _entry("barku", "barco", [], [("Barku grandi", "O barco é grande")], "substantivo", 45),
    _entry("kurason", "coração", [], [("Ña kurason", "Meu coração")], "substantivo", 55),
    _entry("bida", "vida", [], [("Bida bon", "A vida é boa")], "substantivo", 65),
    _entry("djungutu", "abaixar", [], [("Mininu djungutu pa paña fruta", "O menino se abaixou para pegar a fruta")], "verbo", 12),
    _entry("bandona", "abandonar", [], [("Ka bu bandona elis", "Não os abandones")], "verbo", 15),
    _entry("bagera", "abelha", [], [("Bagera ki ta tene kumbu di mel", "Abelha que tem colmeia")], "substantivo", 6),
    _entry("bensua", "abençoar", ["abensua"], [("Garandis bensua ña fidju", "Os velhos abençoam o meu filho")], "verbo", 11),
    _entry("bobra", "abóbora", ["abobra"], [("Kusiña bobra pa kume", "Cozinhar a abóbora para comer")], "substantivo", 7),
    _entry("burisi", "aborrecer", [], [("Ña mame ta burisi ña pape", "A minha mãe aborrece o meu pai")], "verbo", 13),
    _entry("nervozu", "aborrecido", [], [("N'sta nervozu ku ruzultadu", "Estou aborrecido com o resultado")], "adjetivo", 10),
    _entry("barsa", "abraçar", [], [("N' barsa ña amigu", "Abracei o meu amigo")], "verbo", 16),
    _entry("yabri", "abrir", ["abri"], [("Abri porta pa n' yentra", "Abra a porta para eu entrar")], "verbo", 45),
])

COMMON_PHRASES = (
    PhraseEntry(kriol="Kuma ku bu sta?", pt="Como estás?", en="How are you?"),
    PhraseEntry(kriol="N' sta bon, obrigadu", pt="Estou bem, obrigado", en="I'm fine, thank you"),
    PhraseEntry(kriol="Bon dia", pt="Bom dia", en="Good morning"),
    PhraseEntry(kriol="Bon tardi", pt="Boa tarde", en="Good afternoon"),
    PhraseEntry(kriol="Bon noti", pt="Boa noite", en="Good night"),
    PhraseEntry(kriol="N' kre kume", pt="Eu quero comer", en="I want to eat"),
    PhraseEntry(kriol="Undi ku bu mora?", pt="Onde moras?", en="Where do you live?"),
    PhraseEntry(kriol="N' ta papia Kriol", pt="Eu falo Crioulo", en="I speak Creole"),
    PhraseEntry(kriol="Kinti nomi?", pt="Qual é o teu nome?", en="What's your name?"),
    PhraseEntry(kriol="Ña nomi i...", pt="O meu nome é...", en="My name is..."),
    PhraseEntry(kriol="Obrigadu tcheu", pt="Muito obrigado", en="Thank you very much"),
    PhraseEntry(kriol="Di nada", pt="De nada", en="You're welcome"),
    PhraseEntry(kriol="Diskulpa", pt="Desculpa", en="Sorry"),
    PhraseEntry(kriol="N' ka entendi", pt="Não entendo", en="I don't understand"),
    PhraseEntry(kriol="Papia mas dibagar", pt="Fala mais devagar", en="Speak more slowly"),
)
