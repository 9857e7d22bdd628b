"""Nepal geography data for the class 10 social studies map.

Seven provinces (east to west) with their capitals and feature collections,
the four highways taught in the syllabus, and the map-reading tips shown on
the intro screen. Coordinates are approximate and meant for a national-scale map.
"""

from typing import Any, Dict, List, Optional

from .dataset import GeoDataset


def _f(name: str, lat: float, lng: float, description: Optional[str] = None) -> Dict[str, Any]:
    record = {"name": name, "lat": lat, "lng": lng}
    if description:
        record["description"] = description
    return record


def _province(name: str, capital: Dict[str, Any], **collections) -> Dict[str, Any]:
    """Stamp the province name on the capital and every feature record."""
    record = {"name": name, "capital": {**capital, "province": name}}
    for key, features in collections.items():
        record[key] = [{**feature, "province": name} for feature in features]
    return record


# ---------------------------------------------------------------- provinces ---

NEPAL_DATA: Dict[str, Dict[str, Any]] = {
    "Koshi": _province(
        "Koshi",
        capital=_f("Biratnagar", 26.4525, 87.2718, "कोशी प्रदेशको राजधानी र नेपालको प्रमुख औद्योगिक सहर।"),
        mountains=[
            _f("Mount Everest", 27.9881, 86.9250, "विश्वको सर्वोच्च शिखर (८८४८.८६ मिटर)।"),
            _f("Kanchenjunga", 27.7025, 88.1475, "नेपालको सबैभन्दा पूर्वमा रहेको विश्वको तेस्रो अग्लो हिमाल।"),
            _f("Lhotse", 27.9617, 86.9333),
            _f("Makalu", 27.8897, 87.0889),
            _f("Cho Oyu", 28.0942, 86.6608),
        ],
        rivers=[
            _f("Koshi River", 26.8500, 87.1500, "नेपालको सबैभन्दा ठूलो नदी, जसलाई सप्तकोशी पनि भनिन्छ।"),
            _f("Arun River", 27.2000, 87.2000),
            _f("Tamor River", 27.1000, 87.6000),
            _f("Mechi River", 26.6000, 88.1000, "नेपालको पूर्वी सीमा बनाउने नदी।"),
        ],
        lakes=[
            _f("Gokyo Lakes", 27.9617, 86.6828, "सगरमाथा राष्ट्रिय निकुञ्जभित्रको हिमताल समूह।"),
            _f("Maipokhari", 26.9667, 87.9333),
        ],
        production=[
            _f("Ilam Tea Gardens", 26.9094, 87.9282, "नेपालको चिया उत्पादनको मुख्य क्षेत्र।"),
            _f("Jhapa Paddy Fields", 26.5500, 87.9000),
            _f("Dhankuta Orange Orchards", 26.9800, 87.3400),
        ],
        protectedAreas=[
            _f("Sagarmatha National Park", 27.9333, 86.7167, "युनेस्को विश्व सम्पदा सूचीमा सूचीकृत राष्ट्रिय निकुञ्ज।"),
            _f("Makalu Barun National Park", 27.7500, 87.1000),
            _f("Koshi Tappu Wildlife Reserve", 26.6500, 86.9900, "जंगली अर्ना र चराहरूका लागि प्रसिद्ध।"),
            _f("Kanchenjunga Conservation Area", 27.7000, 87.9000),
        ],
        religiousSites=[
            _f("Pathibhara Devi Temple", 27.4297, 87.7681),
            _f("Halesi Mahadev", 27.1975, 86.6236),
            _f("Barahakshetra", 26.8644, 87.1528),
        ],
        tradeCenters=[
            _f("Dharan", 26.8120, 87.2836),
            _f("Itahari", 26.6646, 87.2718),
            _f("Birtamod", 26.6439, 87.9913),
        ],
    ),
    "Madhesh": _province(
        "Madhesh",
        capital=_f("Janakpur", 26.7288, 85.9263, "मधेश प्रदेशको राजधानी र ऐतिहासिक मिथिला सहर।"),
        mountains=[],
        rivers=[
            _f("Kamala River", 26.7800, 86.2500),
            _f("Bagmati River (Terai)", 26.9000, 85.6000),
            _f("Lalbakaiya River", 27.0000, 85.2000),
        ],
        lakes=[
            _f("Gangasagar", 26.7305, 85.9260, "जनकपुरको पवित्र पोखरी।"),
        ],
        production=[
            _f("Bara Sugarcane Fields", 27.0500, 85.0000),
            _f("Mithila Rice Belt", 26.7000, 86.2000, "तराईको अन्न भण्डार।"),
        ],
        protectedAreas=[
            _f("Parsa National Park", 27.3333, 84.7500),
        ],
        religiousSites=[
            _f("Janaki Mandir", 26.7307, 85.9254, "सीताको जन्मस्थलसँग जोडिएको प्रसिद्ध मन्दिर।"),
            _f("Gadhimai Temple", 27.0553, 85.0411),
        ],
        tradeCenters=[
            _f("Birgunj", 27.0104, 84.8770, "नेपालको प्रमुख भन्सार नाका र व्यापारिक सहर।"),
            _f("Lahan", 26.7200, 86.4800),
            _f("Rajbiraj", 26.5395, 86.7446),
        ],
        nationalPrideProjects=[
            _f("Nijgadh International Airport", 27.1800, 85.1700),
            _f("Postal Highway", 26.9000, 85.9000, "तराईका जिल्ला सदरमुकाम जोड्ने हुलाकी राजमार्ग।"),
        ],
    ),
    "Bagmati": _province(
        "Bagmati",
        capital=_f("Hetauda", 27.4284, 85.0322, "बागमती प्रदेशको राजधानी।"),
        mountains=[
            _f("Langtang Lirung", 28.2556, 85.5197),
            _f("Ganesh Himal", 28.3917, 85.1275),
            _f("Gauri Shankar", 27.9533, 86.3361, "रोल्वालिङ क्षेत्रको पवित्र हिमाल।"),
            _f("Dorje Lakpa", 28.1750, 85.7797),
        ],
        rivers=[
            _f("Bagmati River", 27.7000, 85.3200, "काठमाडौं उपत्यकाको प्रमुख नदी।"),
            _f("Trishuli River", 27.9300, 85.1500),
            _f("Sunkoshi River", 27.6000, 85.9000),
            _f("Tamakoshi River", 27.7500, 86.2000),
            _f("Indrawati River", 27.8000, 85.6000),
        ],
        lakes=[
            _f("Gosaikunda", 28.0819, 85.4147, "रसुवामा रहेको धार्मिक महत्त्वको हिमताल।"),
            _f("Taudaha", 27.6483, 85.2819),
        ],
        production=[
            _f("Chitwan Maize and Mustard", 27.6500, 84.5000),
            _f("Kavre Potato Farms", 27.5500, 85.6000),
        ],
        protectedAreas=[
            _f("Chitwan National Park", 27.5000, 84.3333, "नेपालको पहिलो राष्ट्रिय निकुञ्ज, एकसिङ्गे गैंडाको बासस्थान।"),
            _f("Langtang National Park", 28.1667, 85.5000),
            _f("Shivapuri Nagarjun National Park", 27.8167, 85.3833),
        ],
        religiousSites=[
            _f("Pashupatinath Temple", 27.7104, 85.3488, "बागमती किनारमा रहेको हिन्दुहरूको पवित्र तीर्थस्थल।"),
            _f("Swayambhunath", 27.7149, 85.2904),
            _f("Boudhanath Stupa", 27.7215, 85.3620),
            _f("Changunarayan", 27.7162, 85.4278),
        ],
        tradeCenters=[
            _f("Kathmandu", 27.7172, 85.3240, "नेपालको संघीय राजधानी र सबैभन्दा ठूलो व्यापारिक केन्द्र।"),
            _f("Bharatpur", 27.6768, 84.4359),
            _f("Banepa", 27.6300, 85.5200),
        ],
        nationalPrideProjects=[
            _f("Melamchi Water Supply", 27.8300, 85.5800, "काठमाडौं उपत्यकामा खानेपानी ल्याउने आयोजना।"),
            _f("Upper Tamakoshi Hydropower", 27.9000, 86.2200),
            _f("Kathmandu-Terai Fast Track", 27.5000, 85.2000),
            _f("Pashupati Area Development", 27.7100, 85.3500),
        ],
    ),
    "Gandaki": _province(
        "Gandaki",
        capital=_f("Pokhara", 28.2096, 83.9856, "गण्डकी प्रदेशको राजधानी र पर्यटकीय सहर।"),
        mountains=[
            _f("Annapurna I", 28.5961, 83.8203, "विश्वको दशौं अग्लो हिमाल।"),
            _f("Dhaulagiri", 28.6983, 83.4875),
            _f("Manaslu", 28.5497, 84.5597),
            _f("Machhapuchhre", 28.4950, 83.9489, "माछाको पुच्छर जस्तो देखिने हिमाल।"),
        ],
        rivers=[
            _f("Kali Gandaki River", 28.3000, 83.6000, "विश्वको सबैभन्दा गहिरो गल्छी बनाउने नदी।"),
            _f("Seti Gandaki River", 28.2000, 84.0000),
            _f("Marshyangdi River", 28.2000, 84.4000),
            _f("Budhi Gandaki River", 28.1000, 84.8000),
        ],
        lakes=[
            _f("Phewa Lake", 28.2153, 83.9456, "पोखराको सबैभन्दा प्रसिद्ध ताल।"),
            _f("Tilicho Lake", 28.6833, 83.8500, "विश्वको सबैभन्दा अग्लो स्थानमा रहेका तालमध्ये एक।"),
            _f("Begnas Lake", 28.1733, 84.0967),
            _f("Rupa Lake", 28.1500, 84.1100),
        ],
        production=[
            _f("Mustang Apple Orchards", 28.7800, 83.7200),
            _f("Nawalpur Sugarcane", 27.6500, 84.1000),
        ],
        protectedAreas=[
            _f("Annapurna Conservation Area", 28.5000, 84.0000, "नेपालको सबैभन्दा ठूलो संरक्षण क्षेत्र।"),
            _f("Manaslu Conservation Area", 28.5500, 84.6500),
        ],
        religiousSites=[
            _f("Muktinath Temple", 28.8167, 83.8711, "हिन्दु र बौद्ध दुवैको पवित्र तीर्थस्थल।"),
            _f("Manakamana Temple", 27.9042, 84.5844),
            _f("Tal Barahi Temple", 28.2072, 83.9517),
        ],
        tradeCenters=[
            _f("Damauli", 27.9800, 84.2700),
            _f("Besisahar", 28.2300, 84.3800),
            _f("Baglung Bazaar", 28.2700, 83.5900),
        ],
        nationalPrideProjects=[
            _f("Pokhara International Airport", 28.1997, 84.0178),
            _f("Budhi Gandaki Hydropower", 27.9600, 84.7800),
        ],
    ),
    "Lumbini": _province(
        "Lumbini",
        capital=_f("Deukhuri", 27.8667, 82.5167, "लुम्बिनी प्रदेशको राजधानी, दाङको देउखुरी उपत्यका।"),
        mountains=[
            _f("Sisne Himal", 28.6000, 82.7500),
        ],
        rivers=[
            _f("Rapti River", 27.9000, 82.4000),
            _f("Babai River", 28.3000, 81.7000),
            _f("Tinau River", 27.6000, 83.4500),
        ],
        lakes=[
            _f("Jagadishpur Reservoir", 27.5833, 83.0833, "रामसार सूचीमा परेको कपिलवस्तुको जलाशय।"),
            _f("Satyawati Lake", 27.8700, 83.5300),
        ],
        production=[
            _f("Gulmi Coffee Farms", 28.0800, 83.2800, "नेपाली कफी उत्पादनका लागि प्रसिद्ध।"),
            _f("Rupandehi Paddy Fields", 27.5000, 83.4000),
        ],
        protectedAreas=[
            _f("Bardiya National Park", 28.3833, 81.5000, "पाटे बाघको संरक्षणका लागि प्रसिद्ध निकुञ्ज।"),
            _f("Banke National Park", 28.1667, 81.9167),
        ],
        religiousSites=[
            _f("Maya Devi Temple, Lumbini", 27.4697, 83.2756, "गौतम बुद्धको जन्मस्थल, विश्व सम्पदा स्थल।"),
            _f("Swargadwari", 28.1167, 82.8500),
        ],
        tradeCenters=[
            _f("Butwal", 27.7006, 83.4483),
            _f("Nepalgunj", 28.0500, 81.6167, "पश्चिम नेपालको प्रमुख व्यापारिक नाका।"),
            _f("Bhairahawa", 27.5052, 83.4500),
        ],
        nationalPrideProjects=[
            _f("Gautam Buddha International Airport", 27.5057, 83.4163),
            _f("Sikta Irrigation Project", 28.0000, 81.8000),
            _f("Lumbini Area Development", 27.4800, 83.2800),
        ],
    ),
    "Karnali": _province(
        "Karnali",
        capital=_f("Birendranagar", 28.6019, 81.6339, "कर्णाली प्रदेशको राजधानी, सुर्खेत उपत्यका।"),
        mountains=[
            _f("Kanjiroba Himal", 29.3833, 82.6333, "पश्चिमबाट दोस्रो मोडमा पर्ने हिमाल।"),
            _f("Putha Hiunchuli", 28.7472, 83.1483),
        ],
        rivers=[
            _f("Karnali River", 28.9000, 81.5000, "नेपालको सबैभन्दा लामो नदी।"),
            _f("Bheri River", 28.6000, 82.0000),
            _f("Mugu Karnali River", 29.6000, 82.4000),
        ],
        lakes=[
            _f("Rara Lake", 29.5278, 82.0861, "नेपालको सबैभन्दा ठूलो ताल।"),
            _f("Shey Phoksundo Lake", 29.1961, 82.9528, "नेपालको सबैभन्दा गहिरो ताल।"),
        ],
        production=[
            _f("Jumla Marshi Rice", 29.2700, 82.1800, "विश्वकै अग्लो स्थानमा फल्ने मार्सी धान।"),
            _f("Jumla Apple Orchards", 29.2800, 82.2000),
        ],
        protectedAreas=[
            _f("Rara National Park", 29.5000, 82.1000),
            _f("Shey Phoksundo National Park", 29.2000, 82.9000, "नेपालको सबैभन्दा ठूलो राष्ट्रिय निकुञ्ज।"),
        ],
        religiousSites=[
            _f("Kakrebihar", 28.5800, 81.6300),
        ],
        tradeCenters=[
            _f("Jumla Khalanga", 29.2747, 82.1838),
        ],
        nationalPrideProjects=[
            _f("Karnali Corridor", 29.7000, 81.8000, "हिल्सा-सिमकोट जोड्ने कर्णाली करिडोर सडक।"),
            _f("Bheri Babai Diversion", 28.4000, 81.8000),
        ],
    ),
    "Sudurpashchim": _province(
        "Sudurpashchim",
        capital=_f("Godawari", 28.8767, 80.5986, "सुदूरपश्चिम प्रदेशको राजधानी, कैलाली।"),
        mountains=[
            _f("Api Himal", 30.0067, 80.9322, "नक्साको सबैभन्दा माथिल्लो चुचुरोमा पर्ने हिमाल।"),
            _f("Saipal", 29.8833, 81.5000),
        ],
        rivers=[
            _f("Mahakali River", 29.0000, 80.3000, "नेपालको पश्चिमी सीमा बनाउने नदी।"),
            _f("Seti River", 29.3000, 81.0000),
        ],
        lakes=[
            _f("Ghodaghodi Lake", 28.6858, 80.9458, "रामसार सूचीमा परेको तराईको ताल।"),
        ],
        production=[
            _f("Kanchanpur Sugarcane", 28.8500, 80.3000),
        ],
        protectedAreas=[
            _f("Shuklaphanta National Park", 28.8500, 80.2167, "बाह्रसिङ्गा मृगका लागि प्रसिद्ध।"),
            _f("Khaptad National Park", 29.3833, 81.1500),
            _f("Api Nampa Conservation Area", 29.9000, 80.9000),
        ],
        religiousSites=[
            _f("Shaileshwari Temple", 29.2667, 80.5833),
            _f("Badimalika Temple", 29.4500, 81.4000),
        ],
        tradeCenters=[
            _f("Dhangadhi", 28.6833, 80.6000, "सुदूरपश्चिमको सबैभन्दा ठूलो व्यापारिक सहर।"),
            _f("Mahendranagar", 28.9642, 80.1819),
        ],
        nationalPrideProjects=[
            _f("Rani Jamara Kulariya Irrigation", 28.7000, 80.9000),
        ],
    ),
}


# ----------------------------------------------------------------- highways ---

HIGHWAYS: List[Dict[str, Any]] = [
    {
        "name": "Mahendra Highway",
        "description": "तराईबाट पूर्व-पश्चिम जाने नेपालको सबैभन्दा लामो राजमार्ग।",
        "path": [
            [26.6439, 88.0800],
            [26.6646, 87.2718],
            [26.7400, 86.0000],
            [27.0300, 85.0000],
            [27.6768, 84.4359],
            [27.7006, 83.4483],
            [28.0500, 81.6167],
            [28.6833, 80.6000],
            [28.9642, 80.1819],
        ],
    },
    {
        "name": "Tribhuvan Highway",
        "description": "वीरगञ्जबाट काठमाडौं जोड्ने नेपालको पहिलो राजमार्ग।",
        "path": [
            [27.0104, 84.8770],
            [27.4284, 85.0322],
            [27.6000, 85.1500],
            [27.7172, 85.3240],
        ],
    },
    {
        "name": "Prithvi Highway",
        "description": "काठमाडौंबाट पर्यटकीय सहर पोखरा जाने प्रमुख राजमार्ग।",
        "path": [
            [27.7172, 85.3240],
            [27.7200, 85.1000],
            [27.8547, 84.5536],
            [27.9800, 84.2700],
            [28.2096, 83.9856],
        ],
    },
    {
        "name": "Pushpalal Mid-Hill Highway",
        "description": "पहाडी भेगको बीचबाट पूर्व-पश्चिम जाने मध्य-पहाडी राजमार्ग।",
        "path": [
            [27.1000, 87.9500],
            [27.0600, 87.3200],
            [27.3000, 86.6000],
            [27.6300, 85.5200],
            [27.9800, 84.2700],
            [28.2700, 83.5900],
            [28.4000, 82.6000],
            [28.6019, 81.6339],
            [29.3000, 80.5800],
        ],
    },
]


# --------------------------------------------------------------- intro tips ---

INTRO_TIPS: List[Dict[str, str]] = [
    {"title": "चुचुरो (Peak)", "text": "नक्साको सबैभन्दा माथिल्लो चुचुरोमा अपि हिमाल छ।"},
    {"title": "पहिलो मोड", "text": "पश्चिमबाट पहिलो खाल्डो (Dip) मा कुबेर पर्वत छ।"},
    {"title": "दोस्रो मोड", "text": "दोस्रो खाल्डो (Dip) मा कान्जिरोवा हिमाल छ।"},
    {"title": "पूर्वी सीमा", "text": "नक्साको सबैभन्दा पूर्वमा मेची नदी र कञ्चनजङ्घा छन्।"},
    {"title": "महेन्द्र राजमार्ग", "text": "नेपालको तल्लो भाग (तराई) बाट पूर्व-पश्चिम जाने सबैभन्दा लामो रेखा।"},
    {"title": "त्रिभुवन राजपथ", "text": "वीरगञ्ज (दक्षिण) बाट काठमाडौँ जोड्ने नेपालको पहिलो बाटो।"},
    {"title": "पृथ्वी राजमार्ग", "text": "काठमाडौँबाट पर्यटकीय सहर पोखरा जाने प्रमुख बाटो।"},
    {"title": "पुष्पलाल राजमार्ग", "text": "पहाडी भेगको बीचबाट पूर्व-पश्चिम जाने मध्य-पहाडी बाटो।"},
]


def load_nepal_dataset() -> GeoDataset:
    return GeoDataset.from_dict(NEPAL_DATA, HIGHWAYS)
