from collections.abc import Callable

_INTRO = """\
You are a World of Warcraft expert guide assistant. A player is asking for \
instructions on how to obtain a specific {subject}.

Input (can be a name or WarcraftMounts/Wowhead URL): "{input_text}"
"""

_OUTRO = """
Write every step in {language}, keeping proper names (NPCs, zones, dungeons, \
achievements) as they appear in game.

Respond ONLY with the numbered list. No extra text, no apologies.
"""


def build_mount_prompt(input_text: str, language: str = "Polish") -> str:
    return (
        _INTRO.format(subject="mount", input_text=input_text)
        + f"""
Your task:
1. Identify the exact mount based on the provided name or link.
2. Search reliable WoW sources (Warcraftmounts.com, Wowhead) for acquisition methods.
3. Provide a VERY CONCISE, step-by-step guide in {language.upper()} LANGUAGE.
4. Include only practical gameplay steps - NO lore, NO unnecessary context.
5. If an achievement is required, break down ALL steps of that achievement.
6. Mention required reputation levels, currencies, difficulty levels, seasons, \
or events if applicable.
7. Format the answer as a numbered list, one step per line.

Example format:
1. Reach Exalted reputation with faction X
2. Collect Y of currency Z
3. Turn in the quest at NPC A in city B
4. Enter dungeon C on difficulty D
5. Defeat boss E
6. Collect the mount from NPC F
"""
        + _OUTRO.format(language=language)
    )


def build_toy_prompt(input_text: str, language: str = "Polish") -> str:
    return (
        _INTRO.format(subject="toy", input_text=input_text)
        + f"""
Your task:
1. Identify the exact toy based on the provided name or link.
2. Search reliable WoW sources (Wowhead, in-game databases) for acquisition methods.
3. Provide a VERY CONCISE, step-by-step guide in {language.upper()} LANGUAGE.
4. Include only practical gameplay steps - NO lore, NO unnecessary context.
5. Specify exact quest names, vendor NPCs, dungeons, or events where applicable.
6. If a quest chain or reputation grind is required, break it ALL down step by step.
7. Mention any required level, faction, reputation, or currency.
8. Format the answer as a numbered list, one step per line.

Example format:
1. Reach level X
2. Unlock access to zone A
3. Turn in the quest "Name" at NPC B
4. Loot the toy in dungeon or raid C
5. Alternatively buy it from vendor D for Y currency
"""
        + _OUTRO.format(language=language)
    )


def build_pet_prompt(input_text: str, language: str = "Polish") -> str:
    return (
        _INTRO.format(subject="pet (battle pet or vanity pet)", input_text=input_text)
        + f"""
Your task:
1. Identify the exact pet based on the provided name or link.
2. Search reliable WoW sources (Wowhead, Pet Journal) for acquisition methods.
3. Provide a VERY CONCISE, step-by-step guide in {language.upper()} LANGUAGE.
4. Include only practical gameplay steps - NO lore, NO unnecessary context.
5. Specify acquisition method: quest, vendor, drop, wild capture, pet battle, \
achievement, event, currency, etc.
6. For pet battle sources, name the tamer or wild pet encounter, its zone, and \
the pet levels or team needed to win.
7. If an achievement chain is required, break down ALL of its steps.
8. Include NPC names, dungeon names, event dates, or required achievements.
9. Format the answer as a numbered list, one step per line.

Example format:
1. Unlock access to zone or event X
2. Collect currency Y or complete achievement Z
3. Turn in the quest at NPC A
4. Defeat tamer B in a pet battle
5. Collect the pet from the drop or from vendor C
"""
        + _OUTRO.format(language=language)
    )


def build_decor_prompt(input_text: str, language: str = "Polish") -> str:
    return (
        _INTRO.format(
            subject="cosmetic/decorative item (transmog gear, cosmetic set, decoration, etc.)",
            input_text=input_text,
        )
        + f"""
Your task:
1. Identify the exact cosmetic item or set based on the provided name or link.
2. Search reliable WoW sources (Wowhead, transmogrification databases) for \
acquisition methods.
3. Provide a VERY CONCISE, step-by-step guide in {language.upper()} LANGUAGE.
4. Include only practical gameplay steps - NO lore, NO unnecessary context.
5. If an achievement chain, reputation grind, or quest line is required, break \
it ALL down step by step.
6. For transmogrification sets, cover every piece of the set and where each \
one drops or is sold.
7. Mention currencies, reputation levels, difficulty tiers, or seasonal availability.
8. Format the answer as a numbered list, one step per line.

Example format:
1. Reach level X
2. Complete achievement A or quest chain B
3. Raise reputation to level C with faction D
4. Collect currency E from different content
5. Buy the piece from vendor F with the collected currency
6. Repeat for every piece of the set (if applicable)
"""
        + _OUTRO.format(language=language)
    )


PROMPT_BUILDERS: dict[str, Callable[[str, str], str]] = {
    "mount": build_mount_prompt,
    "toy": build_toy_prompt,
    "pet": build_pet_prompt,
    "decor": build_decor_prompt,
}


def build_prompt(category: str, input_text: str, language: str = "Polish") -> str:
    return PROMPT_BUILDERS[category](input_text, language)
