"""The closed set of ARPABET phonemes.

Consonants, vowel sounds and vowel stress are enumerations, and a vowel always
carries exactly one stress value. A `Phoneme` holds either a consonant or a
vowel and renders the same uppercase token that appears in CMUdict:

>>> str(Phoneme.consonant(Consonant.SH))
'SH'
>>> str(Phoneme.vowel(VowelSound.EH, VowelStress.secondary))
'EH2'
>>> Phoneme.from_token("AH0").value.stress
<VowelStress.no_stress: 0>
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Consonant(str, Enum):
    B = "B"  # buy
    CH = "CH"  # China
    D = "D"  # die
    DH = "DH"  # thy
    DX = "DX"  # butter
    EL = "EL"  # bottle
    EM = "EM"  # rhythm
    EN = "EN"  # button
    F = "F"  # fight
    G = "G"  # guy
    HH = "HH"  # high
    JH = "JH"  # jive
    K = "K"  # kite
    L = "L"  # lie
    M = "M"  # my
    N = "N"  # nigh
    NG = "NG"  # sing
    NX = "NX"  # winner
    P = "P"  # pie
    Q = "Q"  # uh-oh, the glottal stop
    R = "R"  # rye
    S = "S"  # sigh
    SH = "SH"  # shy
    T = "T"  # tie
    TH = "TH"  # thigh
    V = "V"  # vie
    W = "W"  # wise
    WH = "WH"  # why
    Y = "Y"  # yacht
    Z = "Z"  # zoo
    ZH = "ZH"  # pleasure

    def to_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class VowelStress(Enum):
    """Stress on a single vowel.

    `unknown` is not part of ARPABET itself: it stands for a vowel written
    without a stress digit.
    """

    unknown = -1
    no_stress = 0
    primary = 1
    secondary = 2

    def to_int(self) -> int:
        return self.value

    @property
    def suffix(self) -> str:
        """The digit appended to the vowel token, '' for unknown stress"""
        if self is VowelStress.unknown:
            return ""
        return str(self.value)


# Order of the stress variants of each vowel sound in ALL_VOWELS and in the
# integer codes of arpabet.extensions
STRESS_ORDER: tuple[VowelStress, ...] = (
    VowelStress.unknown,
    VowelStress.no_stress,
    VowelStress.primary,
    VowelStress.secondary,
)


class VowelSound(str, Enum):
    AA = "AA"  # balm, bot
    AE = "AE"  # bat
    AH = "AH"  # butt
    AO = "AO"  # story
    AW = "AW"  # bout
    AX = "AX"  # comma
    AXR = "AXR"  # letter
    AY = "AY"  # bite
    EH = "EH"  # bet
    ER = "ER"  # bird
    EY = "EY"  # bait
    IH = "IH"  # bit
    IX = "IX"  # roses, rabbit
    IY = "IY"  # beat
    OW = "OW"  # boat
    OY = "OY"  # boy
    UH = "UH"  # book
    UW = "UW"  # boot
    UX = "UX"  # dude

    def __str__(self) -> str:
        return self.value


class Vowel(BaseModel):
    model_config = ConfigDict(frozen=True)

    sound: VowelSound
    stress: VowelStress = VowelStress.unknown

    def to_str(self) -> str:
        """The vowel token including its stress digit, e.g. 'AA1'"""
        return self.sound.value + self.stress.suffix

    def to_str_stressless(self) -> str:
        """The vowel token without its stress digit, e.g. 'AA'"""
        return self.sound.value

    def __str__(self) -> str:
        return self.to_str()


class Phoneme(BaseModel):
    """Either a consonant or a vowel"""

    model_config = ConfigDict(frozen=True)

    value: Consonant | Vowel

    @classmethod
    def consonant(cls, consonant: Consonant) -> "Phoneme":
        return cls(value=consonant)

    @classmethod
    def vowel(
        cls, sound: VowelSound, stress: VowelStress = VowelStress.unknown
    ) -> "Phoneme":
        return cls(value=Vowel(sound=sound, stress=stress))

    @classmethod
    def from_token(cls, token: str) -> "Phoneme":
        """Parse an uppercase ARPABET token such as 'EH1' or 'SH'.

        Raises:
            StringParseError: the token is not a known phoneme
        """
        from arpabet.constants import PHONEME_MAP
        from arpabet.exceptions import StringParseError

        try:
            return PHONEME_MAP[token]
        except KeyError:
            raise StringParseError(token) from None

    @property
    def is_consonant(self) -> bool:
        return isinstance(self.value, Consonant)

    @property
    def is_vowel(self) -> bool:
        return isinstance(self.value, Vowel)

    def to_str(self) -> str:
        return self.value.to_str()

    def __str__(self) -> str:
        return self.to_str()


# A lowercase word without spaces, as keyed in a dictionary
Word = str
# The phonemes of a single word, read in order
Polyphone = list[Phoneme]
