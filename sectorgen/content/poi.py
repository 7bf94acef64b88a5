"""Points of interest: stations, bases and ruins found in a star system."""

from ..models.poi import PointOfInterest
from ..utils.rng import SectorRNG

# Point type -> (possible occupants, possible situations)
POINTS = {
    "Deep-space station": (
        [
            "Dangerously odd transhumans",
            "Freeze-dried ancient corpses",
            "Secretive military observers",
            "Eccentric oligarch and minions",
            "Deranged but brilliant scientist",
        ],
        [
            "Systems breaking down",
            "Foreign sabotage attempt",
            "Black market for the elite",
            "Vault for dangerous pretech",
            "Supply base for pirates",
        ],
    ),
    "Asteroid base": (
        [
            "Zealous religious sectarians",
            "Failed rebels from another world",
            "Wage-slave corporate miners",
            "Independent asteroid prospectors",
            "Pirates masquerading as otherwise",
        ],
        [
            "Life support is threatened",
            "Base needs a new asteroid",
            "Dug out something nasty",
            "Fighting another asteroid",
            "Hit a priceless vein of ore",
        ],
    ),
    "Remote moon base": (
        [
            "Unlucky corporate researchers",
            "Reclusive hermit genius",
            "Remnants of a failed colony",
            "Military listening post",
            "Lonely overseers and robot miners",
        ],
        [
            "Something dark has awoken",
            "Criminals trying to take over",
            "Moon plague breaking out",
            "Desperate for vital supplies",
            "Rich but badly-protected",
        ],
    ),
    "Ancient orbital ruin": (
        [
            "Robots of dubious sentience",
            "Trigger-happy scavengers",
            "Government researchers",
            "Military quarantine enforcers",
            "Heirs of the original alien builders",
        ],
        [
            "Trying to stop it from awakening",
            "Meddling with strange tech",
            "Impending tech calamity",
            "A terrible secret is unearthed",
            "Fighting outside interlopers",
        ],
    ),
    "Research base": (
        [
            "Experiments that have gotten loose",
            "Scientists from a major local corp",
            "Black-ops governmental researchers",
            "Secret employees of a foreign power",
            "Aliens studying the human locals",
        ],
        [
            "Perilous research underway",
            "Hideously immoral research",
            "Held hostage by outsiders",
            "Scientists are mind-altered",
            "Selling research on the black market",
        ],
    ),
    "Asteroid belt": (
        [
            "Grizzled belter mine laborers",
            "Ancient automated guardian drones",
            "Survivors of destroyed asteroid base",
            "Pirates hiding out among the rocks",
            "Lonely rock hermit",
        ],
        [
            "Ruptured rock released a peril",
            "Foreign spy ships hide there",
            "Gold rush for new minerals",
            "Ancient ruins dot the rocks",
            "War between rival rocks",
        ],
    ),
    "Gas giant mine": (
        [
            "Miserable gas-miner slaves or serfs",
            "Strange gas-dwelling aliens",
            "Scrappers in the ruined old mine",
            "Impoverished separatist group",
            "Independent contractors",
        ],
        [
            "Things are emerging below",
            "They need vital supplies",
            "The workers are in revolt",
            "Pirates secretly fuel there",
            "Alien remnants were found",
        ],
    ),
    "Refueling station": (
        [
            "Half-crazed hermit caretaker",
            "Sordid purveyors of decadent fun",
            "Extortionate corporate minions",
            "Religious missionaries to travelers",
            "Brainless automated vendors",
        ],
        [
            "A ship is in severe distress",
            "Pirates have taken over",
            "The station has been abandoned",
            "Someone important is passing",
            "Fueling pirates on the sly",
        ],
    ),
}


def new_poi(rng: SectorRNG) -> PointOfInterest:
    """Generate one point of interest."""
    point = rng.choice(list(POINTS))
    occupants, situations = POINTS[point]
    return PointOfInterest(
        point=point,
        occupied_by=rng.choice(occupants),
        situation=rng.choice(situations),
    )
