"""
Static administrative geography of Tunisia.
File: src/utils/tunisia_locations.py

24 governorates with a hand-curated coordinate (the governorate seat) and the
delegations of each one.  Delegation coordinates are never stored here; they
are derived on demand by ``utils.geography.estimate_location``.

Everything in this module is constant data.  Do not mutate it at runtime.
"""

from types import MappingProxyType

# (latitude, longitude) of each governorate seat --------------------------------
GOVERNORATE_COORDINATES = MappingProxyType({
    "Ariana":      (36.8625, 10.1956),
    "Béja":        (36.7256, 9.1817),
    "Ben Arous":   (36.7531, 10.2189),
    "Bizerte":     (37.2744, 9.8739),
    "Gabès":       (33.8815, 10.0982),
    "Gafsa":       (34.4250, 8.7842),
    "Jendouba":    (36.5011, 8.7803),
    "Kairouan":    (35.6781, 10.0963),
    "Kasserine":   (35.1676, 8.8365),
    "Kébili":      (33.7044, 8.9690),
    "Kef":         (36.1742, 8.7049),
    "Mahdia":      (35.5047, 11.0622),
    "Manouba":     (36.8081, 10.0972),
    "Médenine":    (33.3549, 10.5055),
    "Monastir":    (35.7643, 10.8113),
    "Nabeul":      (36.4561, 10.7376),
    "Sfax":        (34.7406, 10.7603),
    "Sidi Bouzid": (35.0382, 9.4849),
    "Siliana":     (36.0849, 9.3708),
    "Sousse":      (35.8256, 10.6411),
    "Tataouine":   (32.9297, 10.4518),
    "Tozeur":      (33.9197, 8.1335),
    "Tunis":       (36.8065, 10.1815),
    "Zaghouan":    (36.4029, 10.1429),
})

# Alternative spellings seen in planning sheets and client records
GOVERNORATE_ALIASES = MappingProxyType({
    "Le Kef": "Kef",
    "El Kef": "Kef",
    "La Manouba": "Manouba",
})

DELEGATIONS = MappingProxyType({
    "Ariana": (
        "Ariana Ville", "Ettadhamen", "Kalâat el-Andalous", "La Soukra", "M'nihla",
        "Raoued", "Sidi Thabet",
    ),
    "Béja": (
        "Amdoun", "Béja Nord", "Béja Sud", "Goubellat", "Medjez el-Bab", "Nefza",
        "Teboursouk", "Testour", "Thibar",
    ),
    "Ben Arous": (
        "Ben Arous", "Boumhel", "El Mourouj", "Ezzahra", "Fouchana", "Hammam Chott",
        "Hammam-Lif", "M'Hamdia", "Medina Jedida", "Mégrine", "Mornag", "Radès",
    ),
    "Bizerte": (
        "Bizerte Nord", "Bizerte Sud", "Djoumine", "El Alia", "Ghar el-Melh", "Ghezala",
        "Mateur", "Menzel Bourguiba", "Menzel Jemil", "Ras Jebel", "Sejenane", "Tinja",
        "Utique", "Zarzouna",
    ),
    "Gabès": (
        "El Hamma", "Gabès Médina", "Gabès Ouest", "Gabès Sud", "Ghannouch", "Mareth",
        "Matmata", "Métouia", "Menzel El Habib", "Nouvelle Matmata", "Oudhref",
    ),
    "Gafsa": (
        "Belkhir", "El Guettar", "El Ksar", "Gafsa Nord", "Gafsa Sud", "Mdhilla",
        "Métlaoui", "Moularès", "Redeyef", "Sened", "Sidi Aïch",
    ),
    "Jendouba": (
        "Aïn Draham", "Balta-Bou Aouane", "Bou Salem", "Fernana", "Ghardimaou",
        "Jendouba Nord", "Jendouba Sud", "Oued Meliz", "Tabarka",
    ),
    "Kairouan": (
        "Aïn Djeloula", "Bou Hajla", "Chebika", "Echrarda", "El Alâa", "Haffouz",
        "Hajeb el-Ayoun", "Kairouan Nord", "Kairouan Sud", "Menzel Mehiri", "Nasrallah",
        "Oueslatia", "Sbikha",
    ),
    "Kasserine": (
        "El Ayoun", "Fériana", "Foussana", "Haïdra", "Hassi El Ferid", "Jedelienne",
        "Kasserine Nord", "Kasserine Sud", "Majel Bel Abbès", "Sbeïtla", "Sbiba", "Thala",
        "Ezzouhour",
    ),
    "Kébili": (
        "Douz Nord", "Douz Sud", "Faouar", "Kébili Nord", "Kébili Sud", "Rjim Maatoug",
        "Souk Lahad",
    ),
    "Kef": (
        "Dahmani", "El Ksour", "Jérissa", "Kalâat Khasba", "Kalaat Senan", "Kef Est",
        "Kef Ouest", "Nebeur", "Sakiet Sidi Youssef", "Sers", "Tajerouine",
    ),
    "Mahdia": (
        "Bou Merdes", "Chebba", "Chorbane", "El Jem", "Essouassi", "Hebira",
        "Ksour Essef", "Mahdia", "Melloulèche", "Ouled Chamekh", "Rejiche", "Sidi Alouane",
    ),
    "Manouba": (
        "Borj El Amri", "Douar Hicher", "El Batan", "Jedeida", "La Manouba", "Mornaguia",
        "Oued Ellil", "Tebourba",
    ),
    "Médenine": (
        "Ben Gardane", "Beni Khedache", "Djerba Ajim", "Djerba Houmt Souk",
        "Djerba Midoun", "Médenine Nord", "Médenine Sud", "Sidi Makhlouf", "Zarzis",
    ),
    "Monastir": (
        "Bekalta", "Bembla", "Beni Hassen", "Jemmal", "Ksar Hellal", "Monastir",
        "Moknine", "Ouerdanine", "Sahline", "Sayada-Lamta-Bou Hajar", "Teboulba",
        "Zéramdine",
    ),
    "Nabeul": (
        "Béni Khalled", "Béni Khiar", "Bou Argoub", "Dar Chaâbane", "El Haouaria",
        "Grombalia", "Hammamet", "Kélibia", "Korba", "Menzel Bouzelfa", "Menzel Temime",
        "Nabeul", "Soliman", "Takelsa",
    ),
    "Sfax": (
        "Agareb", "Bir Ali Ben Khélifa", "El Amra", "El Hencha", "Ghraïba", "Jebiniana",
        "Kerkennah", "Mahrès", "Menzel Chaker", "Sakiet Eddaïer", "Sakiet Ezzit",
        "Sfax Médina", "Sfax Ouest", "Sfax Sud", "Skhira", "Thyna",
    ),
    "Sidi Bouzid": (
        "Bir el-Haffey", "Cebbala Ouled Asker", "Jilma", "Meknassy", "Menzel Bouzaïene",
        "Ouled Haffouz", "Regueb", "Sidi Ali Ben Aoun", "Sidi Bouzid Est",
        "Sidi Bouzid Ouest", "Souk Jedid",
    ),
    "Siliana": (
        "Bargou", "Bou Arada", "El Aroussa", "El Krib", "Gaâfour", "Kassra", "Makthar",
        "Rouhia", "Siliana Nord", "Siliana Sud",
    ),
    "Sousse": (
        "Akouda", "Bouficha", "Enfidha", "Hammam Sousse", "Hergla", "Kalaa Kebira",
        "Kalaa Seghira", "Kondar", "M'saken", "Sidi Bou Ali", "Sidi El Hani",
        "Sousse Jawhara", "Sousse Médina", "Sousse Riadh",
    ),
    "Tataouine": (
        "Bir Lahmar", "Dhehiba", "Ghomrassen", "Remada", "Smâr", "Tataouine Nord",
        "Tataouine Sud",
    ),
    "Tozeur": (
        "Degueche", "Hazoua", "Nefta", "Tameghza", "Tozeur",
    ),
    "Tunis": (
        "Bab Bhar", "Bab Souika", "Carthage", "Cité El Khadra", "Djebel Jelloud",
        "El Kabaria", "El Kram", "El Menzah", "El Omrane", "El Omrane Supérieur",
        "El Ouardia", "Ezzouhour", "Hraïria", "La Goulette", "La Marsa", "Le Bardo",
        "Médina", "Séjoumi", "Sidi El Béchir", "Sidi Hassine",
    ),
    "Zaghouan": (
        "Bir Mcherga", "El Fahs", "Nadhour", "Saouaf", "Zaghouan", "Zriba",
    ),
})
