from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple

from mempw.core.error_dialect import CatalogError
from mempw.core.models import MAX_MIN_LENGTH

MAX_CATALOG_FILE_BYTES = 1024 * 1024
MAX_CATALOG_WORD_LENGTH = 64
_WORD_RE = re.compile(r"[a-z]+")


def dedupe_keep_order(words: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for w in words:
        n = w.strip().lower()
        if not n or n in seen:
            continue
        seen.add(n)
        out.append(n)
    return out


# Frequent short English words. Kept lowercase ASCII so camel-case boundaries stay readable.
FREQUENT_WORDS = """
able about above accept across act add afraid after again age ago agree ahead aim air alarm album
alert alike alive allow alone along aloud already also alter always amount angle angry animal ankle
answer apart apple apply april arch area argue arise arm army around arrive arrow art article ask
asleep atom attach attack aunt autumn avoid awake award aware away baby back bacon badge bag bake
balance ball band bank bar barely barn base basic basket bath battle beach beam bean bear beat
beauty become bed bee beef before begin behind being belief bell belong below belt bench bend
benefit berry best better beyond bike bill bird birth bit bite bitter black blade blame blank
blanket blast blend bless blind block blood bloom blow blue board boat body boil bold bolt bone
book boost boot border bored borrow boss both bottle bottom bounce bowl box brain branch brave
bread break breath brick bridge brief bright bring broad broken brother brown brush bubble bucket
budget build bulb bunch burden burst bus bush busy butter button buyer cabin cable cactus cage cake
call calm camera camp canal candle candy canvas cap capital captain car carbon card care carpet
carry cart case cash castle casual cat catch cattle cause cave ceiling cell cement center cereal
chain chair chalk chance change chapter charge chart chase cheap check cheese chef cherry chest
chicken chief child chimney choice chunk cinema circle city civil claim clap class clay clean clerk
clever click client cliff climb clinic clock close cloth cloud clown club clue coach coast coat
code coffee coin cold collect color column comb comfort comic common copper copy coral corn corner
cotton couch count country couple course cousin cover cozy crack craft crane crash crater crazy
cream credit crew cricket crisp crop cross crowd crown cruel crumb crush cry cube culture cup
cupboard curious current curtain curve cushion custom cute cycle dad daily dairy damage damp dance
danger daring dash daughter dawn day deal debate decade decide deck deer defend degree delay
deliver demand denial dentist depth desert design desk detail device diary diet digital dinner
dirt dish divide doctor dog doll dolphin domain donkey door dose double dove draft dragon drama
draw dream dress drift drill drink drip drive drop drum dry duck dust duty eager eagle early earn
earth easily east easy echo edge edit effort egg eight elbow elder elegant element elephant elite
else embark ember emotion empty enable end enemy energy engine enjoy enough enter entry equal era
erode error escape essay estate even event ever evil exact exam excess exile exist exit expand
expect expire explain expose extend extra eye fabric face fact fade faint faith fall false fame
family famous fan fancy farm fashion fat fatal father fault feast feather federal fee feed feel
fence festival fever few fiber field figure file film filter final find fine finger finish fire
firm first fiscal fish fit fitness fix flag flame flash flat flavor flee flight flip float flock
floor flower fluid flush fly foam focus fog foil fold follow food foot force forest forget fork
fortune forum forward fossil foster found fox frame frequent fresh friend fringe frog front frost
frown frozen fruit fuel fun funny furnace fury future gadget gain galaxy gallery game gap garage
garden garlic gas gate gather gauge general genius gentle genuine gesture ghost giant gift ginger
giraffe girl give glad glance glare glass glide glimpse globe gloom glory glove glow glue goat
goddess gold good goose gorilla gospel gossip govern gown grab grace grain grant grape grass
gravity great green grid grief grit grocery group grow grunt guard guess guide guilt guitar gun
gym habit hair half hammer hamster hand happy harbor hard harsh harvest hat have hawk hazard head
health heart heavy hedge height hello helmet help hen hero hidden high hill hint hip hire history
hobby hockey hold hole holiday hollow home honey hood hope horn horse hospital host hotel hour
hover hub huge human humble humor hundred hungry hunt hurdle hurry hurt husband hybrid ice icon
idea identify idle ignore ill illegal image imitate immune impact impose improve impulse inch
include income increase index indoor industry infant inform inhale inner input inquiry insect
inside inspire install intact interest into invest invite involve iron island isolate issue item
ivory jacket jaguar jar jazz jealous jeans jelly jewel job join joke journey joy judge juice jump
jungle junior junk just kangaroo keen keep ketchup key kick kid kidney kind kingdom kiss kit
kitchen kite kitten kiwi knee knife knock know lab label labor ladder lady lake lamp language
laptop large later latin laugh laundry lava law lawn lawsuit layer lazy leader leaf learn leave
lecture left leg legal legend leisure lemon lend length lens leopard lesson letter level liberty
library license life lift light like limb limit link lion liquid list little live lizard load
loan lobster local lock logic lonely long loop lottery loud lounge love loyal lucky luggage lumber
lunar lunch luxury lyrics machine mad magic magnet maid mail main major make mammal man manage
mandate mango mansion manual maple marble march margin marine market marriage mask mass master
match material math matrix matter maximum maze meadow mean measure meat mechanic medal media
melody melt member memory mention menu mercy merge merit merry mesh message metal method middle
midnight milk million mimic mind minimum minor minute miracle mirror misery miss mistake mix
mixed mixture mobile model modify mom moment monitor monkey monster month moon moral more morning
mosquito mother motion motor mountain mouse move movie much muffin mule multiply muscle museum
mushroom music must mutual myself mystery myth naive name napkin narrow nasty nation nature near
neck need negative neglect neither nephew nerve nest net network neutral never news next nice
night noble noise nominee noodle normal north nose notable note nothing notice novel now nuclear
number nurse nut oak obey object oblige obscure observe obtain obvious occur ocean october odor
off offer office often oil okay old olive olympic omit once one onion online only open opera
opinion oppose option orange orbit orchard order ordinary organ orient original orphan ostrich
other outdoor outer output outside oval oven over own owner oxygen oyster ozone pact paddle page
pair palace palm panda panel panic panther paper parade parent park parrot party pass patch path
patient patrol pattern pause pave payment peace peanut pear peasant pelican pen penalty pencil
people pepper perfect permit person pet phone photo phrase physical piano picnic picture piece
pig pigeon pill pilot pink pioneer pipe pistol pitch pizza place planet plastic plate play please
pledge pluck plug plunge poem poet point polar pole police pond pony pool popular portion position
possible post potato pottery poverty powder power practice praise predict prefer prepare present
pretty prevent price pride primary print priority prison private prize problem process produce
profit program project promote proof property prosper protect proud provide public pudding pull
pulp pulse pumpkin punch pupil puppy purchase purity purpose purse push put puzzle pyramid quality
quantum quarter question quick quit quiz quote rabbit raccoon race rack radar radio rail rain
raise rally ramp ranch random range rapid rare rate rather raven raw razor ready real reason rebel
rebuild recall receive recipe record recycle reduce reflect reform refuse region regret regular
reject relax release relief rely remain remember remind remove render renew rent reopen repair
repeat replace report require rescue resemble resist resource response result retire retreat
return reunion reveal review reward rhythm rib ribbon rice rich ride ridge rifle right rigid ring
riot ripple risk ritual rival river road roast robot robust rocket romance roof rookie room rose
rotate rough round route royal rubber rude rug rule run runway rural sad saddle sadness safe sail
salad salmon salon salt salute same sample sand satisfy sauce sausage save say scale scan
scare scatter scene scheme school science scissors scorpion scout scrap screen script scrub sea
search season seat second secret section security seed seek segment select sell seminar senior
sense sentence series service session settle setup seven shadow shaft shallow share shed shell
sheriff shield shift shine ship shiver shock shoe shoot shop short shoulder shove shrimp shrug
shuffle shy sibling sick side siege sight sign silent silk silly silver similar simple since sing
siren sister situate six size skate sketch ski skill skin skirt skull slab slam sleep slender
slice slide slight slim slogan slot slow slush small smart smile smoke smooth snack snake snap
sniff snow soap soccer social sock soda soft solar soldier solid solution solve someone song
soon sorry sort soul sound soup source south space spare spatial spawn speak special speed spell
spend sphere spice spider spike spin spirit split spoil sponsor spoon sport spot spray spread
spring spy square squeeze squirrel stable stadium staff stage stairs stamp stand start state stay
steak steel stem step stereo stick still sting stock stomach stone stool story stove strategy
street strike strong struggle student stuff stumble style subject submit subway success such
sudden suffer sugar suggest suit summer sun sunny sunset super supply supreme sure surface surge
surprise surround survey suspect sustain swallow swamp swap swarm swear sweet swift swim swing
switch sword symbol symptom syrup system table tackle tag tail talent talk tank tape target task
taste tattoo taxi teach team tell ten tenant tennis tent term test text thank that theme then
theory there they thing this thought three thrive throw thumb thunder ticket tide tiger tilt
timber time tiny tip tired tissue title toast tobacco today toddler toe together toilet token
tomato tomorrow tone tongue tonight tool tooth top topic topple torch tornado tortoise toss total
tourist toward tower town toy track trade traffic tragic train transfer trap trash travel tray
treat tree trend trial tribe trick trigger trim trip trophy trouble truck true truly trumpet trust
truth try tube tuition tumble tuna tunnel turkey turn turtle twelve twenty twice twin twist two
type typical ugly umbrella unable unaware uncle uncover under undo unfair unfold unhappy uniform
unique unit universe unknown unlock until unusual unveil update upgrade uphold upon upper upset
urban urge usage use used useful useless usual utility vacant vacuum vague valid valley valve van
vanish vapor various vast vault vehicle velvet vendor venture venue verb verify version very
vessel veteran viable vibrant vicious victory video view village vintage violin virtual virus
visa visit visual vital vivid vocal voice void volcano volume vote voyage wage wagon wait walk
wall walnut want warfare warm warrior wash wasp waste water wave way wealth weapon wear weasel
weather web wedding weekend weird welcome west wet whale what wheat wheel when where whip whisper
wide width wife wild will win window wine wing wink winner winter wire wisdom wise wish witness
wolf woman wonder wood wool word work world worry worth wrap wreck wrestle wrist write wrong yard
year yellow you young youth zebra zero zone zoo
""".split()


@dataclass(frozen=True)
class WordCatalog:
    """Immutable ordered word list used as the entropy source for passwords.

    Construction enforces that every word is lowercase ASCII, that no word
    repeats, and that the words together are at least ``MAX_MIN_LENGTH``
    characters long. The last condition is what lets word selection always
    reach any accepted minimum length without running out of unused words.
    """

    words: Tuple[str, ...]

    def __post_init__(self) -> None:
        words = tuple(self.words)
        object.__setattr__(self, "words", words)
        if not words:
            raise CatalogError("word catalog is empty")
        seen: set[str] = set()
        dupes: list[str] = []
        for word in words:
            if not isinstance(word, str) or not _WORD_RE.fullmatch(word):
                raise CatalogError(f"catalog word must be lowercase ASCII letters: {word!r}")
            if len(word) > MAX_CATALOG_WORD_LENGTH:
                raise CatalogError(f"catalog word too long: {word!r}")
            if word in seen and word not in dupes:
                dupes.append(word)
            seen.add(word)
        if dupes:
            sample = ", ".join(repr(w) for w in dupes[:5])
            raise CatalogError(f"word catalog must contain unique words; found duplicates (sample): {sample}")
        total = sum(len(word) for word in words)
        if total < MAX_MIN_LENGTH:
            raise CatalogError(
                f"word catalog too small: words total {total} characters, need at least {MAX_MIN_LENGTH}"
            )

    def __len__(self) -> int:
        return len(self.words)

    def __getitem__(self, index: int) -> str:
        return self.words[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    @property
    def total_length(self) -> int:
        return sum(len(word) for word in self.words)


DEFAULT_CATALOG = WordCatalog(tuple(dedupe_keep_order(FREQUENT_WORDS)))


def load_word_catalog(path: str) -> WordCatalog:
    p = Path(path).expanduser()
    try:
        st = p.stat()
    except FileNotFoundError as exc:
        raise CatalogError(f"word catalog file not found: {p}") from exc
    except OSError as exc:
        raise CatalogError(f"Unable to stat word catalog file '{p}': {exc}") from exc

    if not p.is_file():
        raise CatalogError(f"word catalog path is not a file: {p}")
    if st.st_size > MAX_CATALOG_FILE_BYTES:
        raise CatalogError(f"word catalog file too large: {p} ({st.st_size} bytes)")

    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        raise CatalogError(f"Unable to read word catalog file '{p}': {exc}") from exc

    words: list[str] = []
    for raw_line in text.splitlines():
        # Tolerate UTF-8 BOM if present at file start.
        w = raw_line.strip().lstrip("\ufeff")
        if not w:
            continue
        if any(ch.isspace() for ch in w):
            raise CatalogError(f"Invalid catalog word contains whitespace: {w!r}")
        words.append(w)
    return WordCatalog(tuple(words))
