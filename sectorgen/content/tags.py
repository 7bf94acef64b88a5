"""World tags.

Each world gets two distinct tags. Callers can exclude tags they don't want
in their campaign; matching is case-insensitive.
"""

from typing import Iterable

from ..models.world import WorldTag

WORLD_TAGS = [
    WorldTag("Abandoned Colony", "The world once hosted a colony, but it was destroyed or abandoned."),
    WorldTag("Alien Ruins", "Remnants of a vanished alien civilization lie scattered across the world."),
    WorldTag("Altered Humanity", "The locals have been physically altered by genetic engineering or mutation."),
    WorldTag("Anarchists", "There is no central government; order rests on custom and local bargains."),
    WorldTag("Anthropomorphs", "The natives were engineered or mutated into beast-like forms."),
    WorldTag("Area 51", "The government is hiding something big from the rest of the population."),
    WorldTag("Badlands World", "Something has ruined most of the surface, leaving scattered havens."),
    WorldTag("Battleground", "The world is a warzone for outside powers fighting over it."),
    WorldTag("Beastmasters", "The natives have tamed the local wildlife into mounts, guards and weapons."),
    WorldTag("Bubble Cities", "The population lives in sealed domes against a hostile environment."),
    WorldTag("Cheap Life", "Human life is held cheap; killing is easy and rarely punished."),
    WorldTag("Civil War", "The world is torn between two or more factions fighting for control."),
    WorldTag("Cold War", "Rival powers glare at each other while fighting through proxies."),
    WorldTag("Colonized Population", "A foreign power rules the natives and exploits the world."),
    WorldTag("Cultural Power", "The world's art and ideas are admired and imitated across the sector."),
    WorldTag("Cybercommunists", "Communism backed by pervasive computing and surveillance."),
    WorldTag("Cyborgs", "Cybernetic augmentation is common, cheap and socially expected."),
    WorldTag("Cyclical Doom", "The world suffers recurring catastrophes that reset its civilization."),
    WorldTag("Doomed World", "The world is going to die, and most of its people know it."),
    WorldTag("Dying Race", "The inhabitants are slowly dwindling toward extinction."),
    WorldTag("Eugenic Cult", "A powerful group prizes bloodlines and manipulates breeding."),
    WorldTag("Exchange Consulate", "A bank of interstellar traders keeps a consulate here."),
    WorldTag("Fallen Hegemon", "The world once ruled a wide stellar empire and now lies diminished."),
    WorldTag("Feral World", "Civilization collapsed into savagery after the Scream."),
    WorldTag("Flying Cities", "The population lives in cities that float above the surface."),
    WorldTag("Forbidden Tech", "Somebody on the world is working with dangerous prohibited technology."),
    WorldTag("Former Warriors", "The locals were once famed soldiers, but have laid down arms."),
    WorldTag("Freak Geology", "The world's geology is dramatically strange."),
    WorldTag("Freak Weather", "Bizarre and violent weather patterns dominate daily life."),
    WorldTag("Friendly Foe", "A hostile group on the world is amiable and pleasant to deal with."),
    WorldTag("Gold Rush", "Something valuable has been discovered and fortune seekers flood in."),
    WorldTag("Great Work", "The population is consumed by a massive shared project."),
    WorldTag("Hatred", "The natives bear a deep grudge against some group or world."),
    WorldTag("Heavy Industry", "The world is a major producer of manufactured goods."),
    WorldTag("Heavy Mining", "Valuable ore is extracted at a large scale."),
    WorldTag("Hivemind", "The natives share a collective consciousness."),
    WorldTag("Holy War", "A religious conflict drives the world's politics."),
    WorldTag("Hostile Biosphere", "Local life is actively dangerous to humans."),
    WorldTag("Hostile Space", "The system itself is full of hazards to shipping."),
    WorldTag("Immortals", "The natives have found a way to greatly extend their lives."),
    WorldTag("Local Specialty", "The world produces something prized across the sector."),
    WorldTag("Local Tech", "The locals have technology available nowhere else."),
    WorldTag("Major Spaceyard", "One of the sector's major shipyards orbits this world."),
    WorldTag("Mandarinate", "Government posts are filled through rigorous examinations."),
    WorldTag("Mandate Base", "The world holds a working relic base of the old Terran Mandate."),
    WorldTag("Maneaters", "The locals are cannibals, whether by custom or necessity."),
    WorldTag("Megacorps", "Huge corporations are the real power on the world."),
    WorldTag("Mercenaries", "The world is known for its hired soldiers."),
    WorldTag("Misandry/Misogyny", "One gender is legally and culturally subordinated."),
    WorldTag("Night World", "The surface is in perpetual or near-perpetual darkness."),
    WorldTag("Nomads", "Most of the population travels constantly across the surface."),
    WorldTag("Oceanic World", "The world is covered by water, with little or no dry land."),
    WorldTag("Out of Contact", "The world has been cut off from interstellar contact for centuries."),
    WorldTag("Outpost World", "The world is a small outpost of a few hundred or thousand people."),
    WorldTag("Perimeter Agency", "An agency that hunts forbidden technology operates here."),
    WorldTag("Pilgrimage Site", "The world holds a site that draws pilgrims from far away."),
    WorldTag("Pleasure World", "The world is devoted to providing vice and pleasure to visitors."),
    WorldTag("Police State", "The government watches everyone and punishes dissent harshly."),
    WorldTag("Post-Scarcity", "Advanced technology has removed basic material want."),
    WorldTag("Preceptor Archive", "A repository of lost knowledge is kept by devoted scholars."),
    WorldTag("Pretech Cultists", "The locals worship the relics of pre-Scream technology."),
    WorldTag("Primitive Aliens", "An alien species at a low tech level shares the world."),
    WorldTag("Prison Planet", "The world is, or was, used as a prison."),
    WorldTag("Psionics Academy", "The world hosts one of the rare schools that trains psychics."),
    WorldTag("Psionics Fear", "The locals fear and persecute psychics."),
    WorldTag("Psionics Worship", "Psychics are revered as holy figures."),
    WorldTag("Quarantined World", "Outsiders are barred from landing on the world."),
    WorldTag("Radioactive World", "The world is bathed in lethal radiation."),
    WorldTag("Refugees", "Large numbers of refugees have arrived from elsewhere."),
    WorldTag("Regional Hegemon", "The world dominates its neighbors politically and militarily."),
    WorldTag("Restrictive Laws", "A bewildering code of laws governs all aspects of life."),
    WorldTag("Revanchists", "The locals want back territory or glory they once held."),
    WorldTag("Revolutionaries", "The world is in the grip of a revolution."),
    WorldTag("Rigid Culture", "Social roles are fixed by birth and custom."),
    WorldTag("Rising Hegemon", "The world is building power and expanding its influence."),
    WorldTag("Ritual Combat", "Disputes are settled through formal fights."),
    WorldTag("Robots", "Robots do much of the labor and may have their own rights."),
    WorldTag("Seagoing Cities", "The population lives on vast floating cities."),
    WorldTag("Sealed Menace", "Something terribly dangerous is kept locked away on the world."),
    WorldTag("Secret Masters", "A hidden group secretly controls the world."),
    WorldTag("Sectarians", "The world is split between bitterly opposed religious sects."),
    WorldTag("Seismic Instability", "Constant earthquakes and eruptions shape daily life."),
    WorldTag("Shackled World", "Something prevents the locals from leaving or developing."),
    WorldTag("Societal Despair", "The population has lost hope and purpose."),
    WorldTag("Sole Supplier", "The world is the only source of a vital resource."),
    WorldTag("Taboo Treasure", "The world produces something prized but forbidden elsewhere."),
    WorldTag("Terraform Failure", "Terraforming went wrong and the world is slowly reverting."),
    WorldTag("Theocracy", "The world is ruled by religious authorities."),
    WorldTag("Tomb World", "The native population is dead, leaving only ruins."),
    WorldTag("Trade Hub", "The world is a crossroads of interstellar commerce."),
    WorldTag("Tyranny", "A cruel ruler or regime oppresses the population."),
    WorldTag("Unbraked AI", "An artificial intelligence without limits operates on the world."),
    WorldTag("Urbanized Surface", "The world is covered by one continuous city."),
    WorldTag("Utopia", "The world appears to be a perfect society."),
    WorldTag("Warlords", "The world is divided among petty military strongmen."),
    WorldTag("Xenophiles", "The locals are fascinated by aliens and alien culture."),
    WorldTag("Xenophobes", "The locals distrust and reject outsiders."),
    WorldTag("Zombies", "A plague turns its victims into mindless, violent husks."),
]


def tag_names() -> list[str]:
    """Return every tag name in table order."""
    return [tag.name for tag in WORLD_TAGS]


def available_tags(excluded: Iterable[str] = ()) -> list[WorldTag]:
    """Return the tags not named in excluded (case-insensitive)."""
    blocked = {name.strip().lower() for name in excluded}
    return [tag for tag in WORLD_TAGS if tag.name.lower() not in blocked]


def unknown_tags(names: Iterable[str]) -> list[str]:
    """Return the names that don't match any tag (case-insensitive)."""
    known = {tag.name.lower() for tag in WORLD_TAGS}
    return [name for name in names if name.strip().lower() not in known]
