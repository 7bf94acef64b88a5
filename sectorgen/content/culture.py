"""Culture selection and culture-flavored place names."""

from ..models.culture import Culture
from ..utils.rng import SectorRNG

PLACE_NAMES = {
    Culture.ARABIC: [
        "Adan", "Bayda", "Dimashq", "Halab", "Jannah", "Marrakesh",
        "Najd", "Qadisiyyah", "Sahil", "Tabuk", "Wahat", "Zarqa",
    ],
    Culture.CHINESE: [
        "Anshan", "Baotou", "Chang'an", "Fuzhou", "Guilin", "Huangshan",
        "Jinling", "Kunming", "Luoyang", "Tianjin", "Xiamen", "Yangzhou",
    ],
    Culture.ENGLISH: [
        "Ashford", "Blackmoor", "Cresthaven", "Dunmere", "Fairholt", "Greywater",
        "Hollins", "Kingsreach", "Marlow", "Northwick", "Redcliffe", "Westmarch",
    ],
    Culture.GREEK: [
        "Argos", "Delphi", "Ephesos", "Ithaka", "Korinthos", "Lindos",
        "Mykenai", "Naxos", "Olympia", "Pella", "Samos", "Thebai",
    ],
    Culture.INDIAN: [
        "Amravati", "Dwarka", "Hampi", "Indraprastha", "Kanchi", "Lanka",
        "Madurai", "Nalanda", "Pataliputra", "Ujjain", "Varanasi", "Vijaya",
    ],
    Culture.JAPANESE: [
        "Asuka", "Edo", "Hakone", "Izumo", "Kamakura", "Kyoto",
        "Nara", "Sakai", "Shirakawa", "Takayama", "Yamato", "Yoshino",
    ],
    Culture.LATIN: [
        "Aquileia", "Brundisium", "Capua", "Eboracum", "Lugdunum", "Massilia",
        "Nova Roma", "Ostia", "Ravenna", "Saguntum", "Tarraco", "Verona",
    ],
    Culture.NIGERIAN: [
        "Abeokuta", "Benin", "Ife", "Kano", "Katsina", "Lokoja",
        "Nsukka", "Ogbomosho", "Onitsha", "Oyo", "Sokoto", "Zaria",
    ],
    Culture.RUSSIAN: [
        "Arkhangelsk", "Belgorod", "Irkutsk", "Kazan", "Murmansk", "Novgorod",
        "Pskov", "Ryazan", "Suzdal", "Tobolsk", "Vladimir", "Yaroslavl",
    ],
    Culture.SPANISH: [
        "Alhambra", "Castilla", "Cordoba", "Esperanza", "Granada", "Leon",
        "Merida", "Nueva Sevilla", "Salamanca", "Toledo", "Valencia", "Zaragoza",
    ],
}


def random_culture(rng: SectorRNG) -> Culture:
    """Pick a culture uniformly at random."""
    return rng.choice(list(Culture))


def place_name(rng: SectorRNG, culture: Culture) -> str:
    """Pick a place name in the style of the given culture."""
    return rng.choice(PLACE_NAMES[culture])
