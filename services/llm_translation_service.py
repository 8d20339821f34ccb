"""
LLM Translation Service
Free-text translation through an LLM provider, primed with Kriol orthography,
grammar and core vocabulary. Used as the remote fallback when dictionary
coverage is too low.
"""

import logging
from typing import Optional
from dotenv import load_dotenv

from models.translation import RemoteTranslation
from services.errors import RemoteTranslationError
from services.llm_provider_factory import LLMProvider, LLMProviderFactory, get_llm_client

# Configure logging
logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()

# The model does not report a confidence of its own
AI_CONFIDENCE = 0.95

KRIOL_CONTEXT = """
## GUINEENSE/KRIOL - Crioulo da Guiné-Bissau

### Grafia e Fonologia:
- "k" sempre para som /k/ (kasa, kume, karu)
- "dj" para som /ʤ/ (djuda, djungutu, djuntis)
- "tch" para som /ʧ/ (tchora, tchuba, tchon)
- "ñ" para nasal palatal (ñambi = inhame)
- "n'" para pronome "eu" e nasal velar (n' bai = eu vou)
- "y" para semivogal (yabri = abrir, yagu = água)
- "x" para /ʃ/ (xa = chá, bixiga = bexiga)

### Pronomes Pessoais:
- N' / Ami = eu
- Bu / Bo = tu
- I / El = ele/ela
- No / Anos = nós
- Bos = vocês
- Elis = eles/elas

### Estrutura Gramatical:
- "ta" indica ação habitual: N' ta kume = Eu como (habitualmente)
- "na" indica ação progressiva: N' na kume = Estou comendo
- "ka" é negação: N' ka kre = Eu não quero
- Morfema "-ba" indica passado: N' kumeba = Eu comi
- Preposições: "di" = de, "pa" = para, "ku" = com, "na" = em

### Vocabulário Essencial (Português → Kriol):
- casa = kasa, água = yagu, comida = bianda, trabalho = tarbadju
- homem = omi, mulher = mindjer, criança = mininu
- pai = pape, mãe = mame, filho = fidju, amigo = amigu
- aldeia = tabanka, terra = tera/tchon, chuva = tchuba
- ser/estar = i/sta, ter = tene, fazer = fasi
- ir = bai, vir = bin, ver = odja, falar = papia
- comer = kume, beber = bibi, dormir = durmi
- querer = kre/misti, poder = pudi, saber = sibi
- bom = bon, grande = grandi, pequeno = pekenu, bonito = bonitu
- sim = sin, não = ka, hoje = aos, agora = gosi
- como = kuma, onde = undi, quando = kantu, porque = pabia

### Frases Comuns:
- Como estás? = Kuma ku bu sta?
- Estou bem = N' sta bon
- Obrigado = Obrigadu
- Bom dia = Bon dia
- Eu não entendo = N' ka ta intindi
- Qual é o teu nome? = Kuma ki bu tchoma?
"""

SYSTEM_PROMPT = f"""Você é um tradutor especialista em Crioulo da Guiné-Bissau (Guineense/Kriol), treinado com dicionários bilíngues acadêmicos.

{KRIOL_CONTEXT}

REGRAS DE TRADUÇÃO OBRIGATÓRIAS:
1. Traduza de forma NATURAL, conectando palavras em frases coerentes como um falante nativo
2. Use a grafia padrão do Kriol (k em vez de c/q, dj, tch, y, etc.)
3. Para frases longas, traduza o SENTIDO COMPLETO, não palavra por palavra
4. Mantenha expressões idiomáticas quando possível, adaptando para equivalentes naturais
5. Se não souber uma palavra específica, use uma aproximação natural baseada no contexto
6. RETORNE APENAS A TRADUÇÃO, sem explicações, aspas ou prefixos
7. Preserve o tom e a intenção do texto original
8. Para textos em Kriol, aceite variações ortográficas comuns (ex: kaza/kasa, mindjer/minjer)"""


class LLMTranslationService:
    """Remote translator backed by an LLM provider"""

    def __init__(self, provider: Optional[LLMProvider] = None, model: Optional[str] = None):
        self._provider = provider
        self.model = model or LLMProviderFactory.get_default_model()

    @property
    def provider(self) -> LLMProvider:
        # Created on first use so a missing API key only fails the AI branch
        if self._provider is None:
            self._provider = get_llm_client()
        return self._provider

    def __call__(self, text: str, from_lang_name: str, to_lang_name: str) -> RemoteTranslation:
        return self.translate(text, from_lang_name, to_lang_name)

    def translate(self, text: str, from_lang_name: str, to_lang_name: str) -> RemoteTranslation:
        """
        Translate free text with the LLM.

        Args:
            text: The untouched input text
            from_lang_name: Source language name as used in the prompt
            to_lang_name: Target language name as used in the prompt

        Returns:
            RemoteTranslation with a fixed confidence of 0.95

        Raises:
            ValueError: If the LLM provider is not configured
            RemoteTranslationError: If the call fails or returns an empty translation
        """
        user_prompt = f"""Traduza o seguinte texto de {from_lang_name} para {to_lang_name}:

"{text}"

Retorne APENAS a tradução, nada mais."""

        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": user_prompt}
        ]

        provider = self.provider
        logger.info(f"Translating from {from_lang_name} to {to_lang_name}: '{text[:100]}'")

        try:
            response = provider.create_chat_completion(
                messages=messages,
                model=self.model,
                temperature=0.3,
                max_tokens=4000
            )
        except Exception as e:
            raise RemoteTranslationError(f"LLM translation request failed: {e}") from e

        translation = response["content"].strip()
        if not translation:
            raise RemoteTranslationError("Empty translation received from LLM")

        logger.info(
            f"Translation result: '{translation[:100]}'. "
            f"Tokens: {response['usage']['total_tokens']}"
        )
        return RemoteTranslation(translation=translation, confidence=AI_CONFIDENCE)
