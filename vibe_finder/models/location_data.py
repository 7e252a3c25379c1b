"""
世界の地点データ

バイブごと・信頼度区分ごとの検索対象地点。
primary は最も信頼度の高い候補、secondary は中程度、fallback は世界全体をカバーする最後の候補。
各リストは優先度順に並んでいるとは限らず、座標の重複も含まれる（読み出し時に排除する）。
"""

PRIMARY_LOCATIONS = {
    "sunny": [
        {"name": "San Diego, California", "lat": 32.7157, "lon": -117.1611, "tz": "America/Los_Angeles", "country": "United States", "priority": 10},
        {"name": "Los Angeles, California", "lat": 34.0522, "lon": -118.2437, "tz": "America/Los_Angeles", "country": "United States", "priority": 9},
        {"name": "Phoenix, Arizona", "lat": 33.4484, "lon": -112.0740, "tz": "America/Phoenix", "country": "United States", "priority": 8},
        {"name": "Nice, France", "lat": 43.7102, "lon": 7.2620, "tz": "Europe/Paris", "country": "France", "priority": 7},
        {"name": "Barcelona, Spain", "lat": 41.3851, "lon": 2.1734, "tz": "Europe/Madrid", "country": "Spain", "priority": 6},
        {"name": "Athens, Greece", "lat": 37.9838, "lon": 23.7275, "tz": "Europe/Athens", "country": "Greece", "priority": 5},
        {"name": "Las Vegas, Nevada", "lat": 36.1699, "lon": -115.1398, "tz": "America/Los_Angeles", "country": "United States", "priority": 9},
        {"name": "Miami, Florida", "lat": 25.7617, "lon": -80.1918, "tz": "America/New_York", "country": "United States", "priority": 8},
        {"name": "Honolulu, Hawaii", "lat": 21.3099, "lon": -157.8581, "tz": "Pacific/Honolulu", "country": "United States", "priority": 5},
        {"name": "Yuma, Arizona", "lat": 32.6927, "lon": -114.6277, "tz": "America/Phoenix", "country": "United States", "priority": 10},
        {"name": "Aswan, Egypt", "lat": 24.0889, "lon": 32.8998, "tz": "Africa/Cairo", "country": "Egypt", "priority": 10},
        {"name": "Luxor, Egypt", "lat": 25.6872, "lon": 32.6396, "tz": "Africa/Cairo", "country": "Egypt", "priority": 10},
        {"name": "Atacama Desert, Chile", "lat": -24.5000, "lon": -69.2500, "tz": "America/Santiago", "country": "Chile", "priority": 10},
        {"name": "Las Vegas, Nevada", "lat": 36.1699, "lon": -115.1398, "tz": "America/Los_Angeles", "country": "United States", "priority": 9},
        {"name": "Tucson, Arizona", "lat": 32.2226, "lon": -110.9747, "tz": "America/Phoenix", "country": "United States", "priority": 9},
        {"name": "Palm Springs, California", "lat": 33.8303, "lon": -116.5453, "tz": "America/Los_Angeles", "country": "United States", "priority": 9},
        {"name": "Seville, Spain", "lat": 37.3886, "lon": -5.9823, "tz": "Europe/Madrid", "country": "Spain", "priority": 9},
        {"name": "Valencia, Spain", "lat": 39.4699, "lon": -0.3763, "tz": "Europe/Madrid", "country": "Spain", "priority": 9},
        {"name": "Palermo, Italy", "lat": 38.1157, "lon": 13.3615, "tz": "Europe/Rome", "country": "Italy", "priority": 9},
        {"name": "Catania, Italy", "lat": 37.5079, "lon": 15.0830, "tz": "Europe/Rome", "country": "Italy", "priority": 9},
        {"name": "Heraklion, Greece", "lat": 35.3387, "lon": 25.1442, "tz": "Europe/Athens", "country": "Greece", "priority": 9},
        {"name": "Rhodes, Greece", "lat": 36.4341, "lon": 28.2176, "tz": "Europe/Athens", "country": "Greece", "priority": 9},
        {"name": "Larnaca, Cyprus", "lat": 34.9167, "lon": 33.6333, "tz": "Asia/Nicosia", "country": "Cyprus", "priority": 9},
        {"name": "Tel Aviv, Israel", "lat": 32.0853, "lon": 34.7818, "tz": "Asia/Jerusalem", "country": "Israel", "priority": 8},
        {"name": "Antalya, Turkey", "lat": 36.8969, "lon": 30.7133, "tz": "Europe/Istanbul", "country": "Turkey", "priority": 8},
        {"name": "Perth, Australia", "lat": -31.9505, "lon": 115.8605, "tz": "Australia/Perth", "country": "Australia", "priority": 8},
        {"name": "Adelaide, Australia", "lat": -34.9285, "lon": 138.6007, "tz": "Australia/Adelaide", "country": "Australia", "priority": 8},
        {"name": "Cape Town, South Africa", "lat": -33.9249, "lon": 18.4241, "tz": "Africa/Johannesburg", "country": "South Africa", "priority": 8},
        {"name": "Marrakech, Morocco", "lat": 31.6295, "lon": -7.9811, "tz": "Africa/Casablanca", "country": "Morocco", "priority": 8},
        {"name": "Agadir, Morocco", "lat": 30.4278, "lon": -9.5981, "tz": "Africa/Casablanca", "country": "Morocco", "priority": 8},
    ],
    "rainy": [
        {"name": "Bergen, Norway", "lat": 60.3913, "lon": 5.3221, "tz": "Europe/Oslo", "country": "Norway", "priority": 10},
        {"name": "Edinburgh, Scotland", "lat": 55.9533, "lon": -3.1883, "tz": "Europe/London", "country": "United Kingdom", "priority": 9},
        {"name": "Dublin, Ireland", "lat": 53.3498, "lon": -6.2603, "tz": "Europe/Dublin", "country": "Ireland", "priority": 8},
        {"name": "Portland, Oregon", "lat": 45.5152, "lon": -122.6784, "tz": "America/Los_Angeles", "country": "United States", "priority": 7},
        {"name": "Seattle, Washington", "lat": 47.6062, "lon": -122.3321, "tz": "America/Los_Angeles", "country": "United States", "priority": 6},
        {"name": "Vancouver, Canada", "lat": 49.2827, "lon": -123.1207, "tz": "America/Vancouver", "country": "Canada", "priority": 5},
        {"name": "Cork, Ireland", "lat": 51.8985, "lon": -8.4756, "tz": "Europe/Dublin", "country": "Ireland", "priority": 4},
        {"name": "Glasgow, Scotland", "lat": 55.8642, "lon": -4.2518, "tz": "Europe/London", "country": "United Kingdom", "priority": 3},
        {"name": "Seattle, Washington", "lat": 47.6062, "lon": -122.3321, "tz": "America/Los_Angeles", "country": "United States", "priority": 10},
        {"name": "Portland, Oregon", "lat": 45.5152, "lon": -122.6784, "tz": "America/Los_Angeles", "country": "United States", "priority": 9},
        {"name": "Vancouver, Canada", "lat": 49.2827, "lon": -123.1207, "tz": "America/Vancouver", "country": "Canada", "priority": 8},
        {"name": "London, England", "lat": 51.5074, "lon": -0.1278, "tz": "Europe/London", "country": "United Kingdom", "priority": 7},
        {"name": "Mumbai, India", "lat": 19.0760, "lon": 72.8777, "tz": "Asia/Kolkata", "country": "India", "priority": 10},
        {"name": "Cherrapunji, India", "lat": 25.3000, "lon": 91.7000, "tz": "Asia/Kolkata", "country": "India", "priority": 10},
        {"name": "Hilo, Hawaii", "lat": 19.7297, "lon": -155.0900, "tz": "Pacific/Honolulu", "country": "United States", "priority": 10},
        {"name": "Mawsynram, India", "lat": 25.2972, "lon": 91.5833, "tz": "Asia/Kolkata", "country": "India", "priority": 10},
        {"name": "Kuala Lumpur, Malaysia", "lat": 3.1390, "lon": 101.6869, "tz": "Asia/Kuala_Lumpur", "country": "Malaysia", "priority": 9},
        {"name": "Singapore", "lat": 1.3521, "lon": 103.8198, "tz": "Asia/Singapore", "country": "Singapore", "priority": 9},
        {"name": "Manaus, Brazil", "lat": -3.1190, "lon": -60.0217, "tz": "America/Manaus", "country": "Brazil", "priority": 9},
        {"name": "Belém, Brazil", "lat": -1.4558, "lon": -48.4902, "tz": "America/Belem", "country": "Brazil", "priority": 9},
        {"name": "Dhaka, Bangladesh", "lat": 23.8103, "lon": 90.4125, "tz": "Asia/Dhaka", "country": "Bangladesh", "priority": 9},
        {"name": "Yangon, Myanmar", "lat": 16.8661, "lon": 96.1951, "tz": "Asia/Yangon", "country": "Myanmar", "priority": 9},
        {"name": "Ho Chi Minh City, Vietnam", "lat": 10.8231, "lon": 106.6297, "tz": "Asia/Ho_Chi_Minh", "country": "Vietnam", "priority": 9},
        {"name": "Chennai, India", "lat": 13.0827, "lon": 80.2707, "tz": "Asia/Kolkata", "country": "India", "priority": 8},
        {"name": "Kochi, India", "lat": 9.9312, "lon": 76.2673, "tz": "Asia/Kolkata", "country": "India", "priority": 8},
        {"name": "Colombo, Sri Lanka", "lat": 6.9271, "lon": 79.8612, "tz": "Asia/Colombo", "country": "Sri Lanka", "priority": 8},
        {"name": "Bangkok, Thailand", "lat": 13.7563, "lon": 100.5018, "tz": "Asia/Bangkok", "country": "Thailand", "priority": 8},
        {"name": "Chittagong, Bangladesh", "lat": 22.3569, "lon": 91.7832, "tz": "Asia/Dhaka", "country": "Bangladesh", "priority": 8},
        {"name": "Quito, Ecuador", "lat": -0.1807, "lon": -78.4678, "tz": "America/Guayaquil", "country": "Ecuador", "priority": 8},
        {"name": "Valdivia, Chile", "lat": -39.8142, "lon": -73.2459, "tz": "America/Santiago", "country": "Chile", "priority": 8},
    ],
    "stormy": [
        {"name": "Kansas City, Missouri", "lat": 39.0997, "lon": -94.5786, "tz": "America/Chicago", "country": "United States", "priority": 10},
        {"name": "Oklahoma City, Oklahoma", "lat": 35.4676, "lon": -97.5164, "tz": "America/Chicago", "country": "United States", "priority": 9},
        {"name": "Wichita, Kansas", "lat": 37.6872, "lon": -97.3301, "tz": "America/Chicago", "country": "United States", "priority": 8},
        {"name": "Aberdeen, Scotland", "lat": 57.1497, "lon": -2.0943, "tz": "Europe/London", "country": "United Kingdom", "priority": 7},
        {"name": "Bergen, Norway", "lat": 60.3913, "lon": 5.3221, "tz": "Europe/Oslo", "country": "Norway", "priority": 6},
        {"name": "Miami, Florida", "lat": 25.7617, "lon": -80.1918, "tz": "America/New_York", "country": "United States", "priority": 10},
        {"name": "New Orleans, Louisiana", "lat": 29.9511, "lon": -90.0715, "tz": "America/Chicago", "country": "United States", "priority": 9},
        {"name": "Houston, Texas", "lat": 29.7604, "lon": -95.3698, "tz": "America/Chicago", "country": "United States", "priority": 8},
        {"name": "Tampa, Florida", "lat": 27.9506, "lon": -82.4572, "tz": "America/New_York", "country": "United States", "priority": 7},
        {"name": "Charleston, South Carolina", "lat": 32.7767, "lon": -79.9311, "tz": "America/New_York", "country": "United States", "priority": 6},
        {"name": "Savannah, Georgia", "lat": 32.0835, "lon": -81.0998, "tz": "America/New_York", "country": "United States", "priority": 5},
        {"name": "Moore, Oklahoma", "lat": 35.3395, "lon": -97.4864, "tz": "America/Chicago", "country": "United States", "priority": 10},
        {"name": "Joplin, Missouri", "lat": 37.0842, "lon": -94.5133, "tz": "America/Chicago", "country": "United States", "priority": 10},
        {"name": "Tornado Alley Center, Kansas", "lat": 37.5000, "lon": -98.0000, "tz": "America/Chicago", "country": "United States", "priority": 10},
        {"name": "Lake Maracaibo, Venezuela", "lat": 9.7489, "lon": -71.2070, "tz": "America/Caracas", "country": "Venezuela", "priority": 10},
        {"name": "Kampala, Uganda", "lat": 0.3476, "lon": 32.5825, "tz": "Africa/Kampala", "country": "Uganda", "priority": 10},
        {"name": "Darwin, Australia", "lat": -12.4634, "lon": 130.8456, "tz": "Australia/Darwin", "country": "Australia", "priority": 9},
        {"name": "Tampa, Florida", "lat": 27.9506, "lon": -82.4572, "tz": "America/New_York", "country": "United States", "priority": 9},
        {"name": "Miami, Florida", "lat": 25.7617, "lon": -80.1918, "tz": "America/New_York", "country": "United States", "priority": 9},
        {"name": "Stornoway, Scotland", "lat": 58.2090, "lon": -6.3890, "tz": "Europe/London", "country": "United Kingdom", "priority": 9},
        {"name": "Faroe Islands, Tórshavn", "lat": 62.0079, "lon": -6.7719, "tz": "Atlantic/Faroe", "country": "Faroe Islands", "priority": 9},
        {"name": "Reykjavik, Iceland", "lat": 64.1466, "lon": -21.9426, "tz": "Atlantic/Reykjavik", "country": "Iceland", "priority": 9},
        {"name": "Stavanger, Norway", "lat": 58.9700, "lon": 5.7331, "tz": "Europe/Oslo", "country": "Norway", "priority": 8},
        {"name": "Trondheim, Norway", "lat": 63.4305, "lon": 10.3951, "tz": "Europe/Oslo", "country": "Norway", "priority": 8},
        {"name": "Tulsa, Oklahoma", "lat": 36.1539, "lon": -95.9928, "tz": "America/Chicago", "country": "United States", "priority": 8},
        {"name": "Topeka, Kansas", "lat": 39.0473, "lon": -95.6890, "tz": "America/Chicago", "country": "United States", "priority": 8},
        {"name": "Amarillo, Texas", "lat": 35.2220, "lon": -101.8313, "tz": "America/Chicago", "country": "United States", "priority": 8},
        {"name": "Dallas, Texas", "lat": 32.7767, "lon": -96.7970, "tz": "America/Chicago", "country": "United States", "priority": 8},
        {"name": "Fort Worth, Texas", "lat": 32.7555, "lon": -97.3308, "tz": "America/Chicago", "country": "United States", "priority": 8},
    ],
    "snowy": [
        {"name": "Fairbanks, Alaska", "lat": 64.8378, "lon": -147.7164, "tz": "America/Anchorage", "country": "United States", "priority": 10},
        {"name": "Anchorage, Alaska", "lat": 61.2181, "lon": -149.9003, "tz": "America/Anchorage", "country": "United States", "priority": 10},
        {"name": "Reykjavik, Iceland", "lat": 64.1466, "lon": -21.9426, "tz": "Atlantic/Reykjavik", "country": "Iceland", "priority": 9},
        {"name": "Tromsø, Norway", "lat": 69.6496, "lon": 18.9553, "tz": "Europe/Oslo", "country": "Norway", "priority": 9},
        {"name": "Murmansk, Russia", "lat": 68.9585, "lon": 33.0827, "tz": "Europe/Moscow", "country": "Russia", "priority": 9},
        {"name": "Yellowknife, Canada", "lat": 62.4540, "lon": -114.3718, "tz": "America/Yellowknife", "country": "Canada", "priority": 9},
        {"name": "Rovaniemi, Finland", "lat": 66.5039, "lon": 25.7294, "tz": "Europe/Helsinki", "country": "Finland", "priority": 8},
        {"name": "Oslo, Norway", "lat": 59.9139, "lon": 10.7522, "tz": "Europe/Oslo", "country": "Norway", "priority": 8},
        {"name": "Stockholm, Sweden", "lat": 59.3293, "lon": 18.0686, "tz": "Europe/Stockholm", "country": "Sweden", "priority": 7},
        {"name": "Helsinki, Finland", "lat": 60.1699, "lon": 24.9384, "tz": "Europe/Helsinki", "country": "Finland", "priority": 7},
        {"name": "Montreal, Canada", "lat": 45.5017, "lon": -73.5673, "tz": "America/Toronto", "country": "Canada", "priority": 6},
        {"name": "Calgary, Canada", "lat": 51.0447, "lon": -114.0719, "tz": "America/Edmonton", "country": "Canada", "priority": 6},
        {"name": "Edmonton, Canada", "lat": 53.5461, "lon": -113.4938, "tz": "America/Edmonton", "country": "Canada", "priority": 6},
        {"name": "Denver, Colorado", "lat": 39.7392, "lon": -104.9903, "tz": "America/Denver", "country": "United States", "priority": 5},
        {"name": "Salt Lake City, Utah", "lat": 40.7608, "lon": -111.8910, "tz": "America/Denver", "country": "United States", "priority": 5},
        {"name": "Anchorage, Alaska", "lat": 61.2181, "lon": -149.9003, "tz": "America/Anchorage", "country": "United States", "priority": 10},
        {"name": "Fairbanks, Alaska", "lat": 64.8378, "lon": -147.7164, "tz": "America/Anchorage", "country": "United States", "priority": 9},
        {"name": "Reykjavik, Iceland", "lat": 64.1466, "lon": -21.9426, "tz": "Atlantic/Reykjavik", "country": "Iceland", "priority": 8},
        {"name": "Oslo, Norway", "lat": 59.9139, "lon": 10.7522, "tz": "Europe/Oslo", "country": "Norway", "priority": 7},
        {"name": "Stockholm, Sweden", "lat": 59.3293, "lon": 18.0686, "tz": "Europe/Stockholm", "country": "Sweden", "priority": 6},
        {"name": "Helsinki, Finland", "lat": 60.1699, "lon": 24.9384, "tz": "Europe/Helsinki", "country": "Finland", "priority": 5},
        {"name": "Anchorage, Alaska", "lat": 61.2181, "lon": -149.9003, "tz": "America/Anchorage", "country": "United States", "priority": 10},
        {"name": "Fairbanks, Alaska", "lat": 64.8378, "lon": -147.7164, "tz": "America/Anchorage", "country": "United States", "priority": 9},
        {"name": "Reykjavik, Iceland", "lat": 64.1466, "lon": -21.9426, "tz": "Atlantic/Reykjavik", "country": "Iceland", "priority": 8},
        {"name": "Oslo, Norway", "lat": 59.9139, "lon": 10.7522, "tz": "Europe/Oslo", "country": "Norway", "priority": 7},
        {"name": "Stockholm, Sweden", "lat": 59.3293, "lon": 18.0686, "tz": "Europe/Stockholm", "country": "Sweden", "priority": 6},
        {"name": "Helsinki, Finland", "lat": 60.1699, "lon": 24.9384, "tz": "Europe/Helsinki", "country": "Finland", "priority": 5},
        {"name": "Barrow (Utqiagvik), Alaska", "lat": 71.2906, "lon": -156.7886, "tz": "America/Anchorage", "country": "United States", "priority": 10},
        {"name": "Alert, Nunavut", "lat": 82.5018, "lon": -62.3481, "tz": "America/Toronto", "country": "Canada", "priority": 10},
        {"name": "Longyearbyen, Svalbard", "lat": 78.2232, "lon": 15.6267, "tz": "Arctic/Longyearbyen", "country": "Norway", "priority": 10},
        {"name": "Kiruna, Sweden", "lat": 67.8558, "lon": 20.2253, "tz": "Europe/Stockholm", "country": "Sweden", "priority": 10},
        {"name": "Tromsø, Norway", "lat": 69.6496, "lon": 18.9553, "tz": "Europe/Oslo", "country": "Norway", "priority": 10},
        {"name": "Murmansk, Russia", "lat": 68.9585, "lon": 33.0827, "tz": "Europe/Moscow", "country": "Russia", "priority": 9},
        {"name": "Rovaniemi, Finland", "lat": 66.5039, "lon": 25.7294, "tz": "Europe/Helsinki", "country": "Finland", "priority": 9},
        {"name": "Inuvik, Northwest Territories", "lat": 68.3607, "lon": -133.7230, "tz": "America/Inuvik", "country": "Canada", "priority": 9},
        {"name": "Yellowknife, Northwest Territories", "lat": 62.4540, "lon": -114.3718, "tz": "America/Yellowknife", "country": "Canada", "priority": 9},
        {"name": "Iqaluit, Nunavut", "lat": 63.7467, "lon": -68.5170, "tz": "America/Iqaluit", "country": "Canada", "priority": 9},
        {"name": "Whitehorse, Yukon", "lat": 60.7212, "lon": -135.0568, "tz": "America/Whitehorse", "country": "Canada", "priority": 9},
        {"name": "Zermatt, Switzerland", "lat": 46.0207, "lon": 7.7491, "tz": "Europe/Zurich", "country": "Switzerland", "priority": 8},
        {"name": "St. Moritz, Switzerland", "lat": 46.4908, "lon": 9.8355, "tz": "Europe/Zurich", "country": "Switzerland", "priority": 8},
        {"name": "Chamonix, France", "lat": 45.9237, "lon": 6.8694, "tz": "Europe/Paris", "country": "France", "priority": 8},
        {"name": "Innsbruck, Austria", "lat": 47.2692, "lon": 11.4041, "tz": "Europe/Vienna", "country": "Austria", "priority": 8},
        {"name": "Garmisch-Partenkirchen, Germany", "lat": 47.4917, "lon": 11.0954, "tz": "Europe/Berlin", "country": "Germany", "priority": 8},
        {"name": "Banff, Alberta", "lat": 51.1784, "lon": -115.5708, "tz": "America/Edmonton", "country": "Canada", "priority": 8},
        {"name": "Jasper, Alberta", "lat": 52.8737, "lon": -118.0814, "tz": "America/Edmonton", "country": "Canada", "priority": 8},
        {"name": "Lake Louise, Alberta", "lat": 51.4254, "lon": -116.1773, "tz": "America/Edmonton", "country": "Canada", "priority": 8},
    ],
    "breezy": [
        {"name": "Chicago, Illinois", "lat": 41.8781, "lon": -87.6298, "tz": "America/Chicago", "country": "United States", "priority": 10},
        {"name": "San Francisco, California", "lat": 37.7749, "lon": -122.4194, "tz": "America/Los_Angeles", "country": "United States", "priority": 9},
        {"name": "Wellington, New Zealand", "lat": -41.2924, "lon": 174.7787, "tz": "Pacific/Auckland", "country": "New Zealand", "priority": 8},
        {"name": "Amsterdam, Netherlands", "lat": 52.3676, "lon": 4.9041, "tz": "Europe/Amsterdam", "country": "Netherlands", "priority": 7},
        {"name": "Cape Horn, Chile", "lat": -55.9833, "lon": -67.2667, "tz": "America/Punta_Arenas", "country": "Chile", "priority": 10},
        {"name": "Cape of Good Hope, South Africa", "lat": -34.3587, "lon": 18.4716, "tz": "Africa/Johannesburg", "country": "South Africa", "priority": 10},
        {"name": "Great Plains Wind Corridor, Kansas", "lat": 38.5000, "lon": -98.0000, "tz": "America/Chicago", "country": "United States", "priority": 10},
        {"name": "Dodge City, Kansas", "lat": 37.7528, "lon": -100.0171, "tz": "America/Chicago", "country": "United States", "priority": 10},
        {"name": "Amarillo, Texas", "lat": 35.2220, "lon": -101.8313, "tz": "America/Chicago", "country": "United States", "priority": 9},
        {"name": "Lubbock, Texas", "lat": 33.5779, "lon": -101.8552, "tz": "America/Chicago", "country": "United States", "priority": 9},
        {"name": "Corpus Christi, Texas", "lat": 27.8006, "lon": -97.3964, "tz": "America/Chicago", "country": "United States", "priority": 9},
        {"name": "Oklahoma City, Oklahoma", "lat": 35.4676, "lon": -97.5164, "tz": "America/Chicago", "country": "United States", "priority": 9},
        {"name": "Cheyenne, Wyoming", "lat": 41.1400, "lon": -104.8197, "tz": "America/Denver", "country": "United States", "priority": 9},
        {"name": "Medicine Hat, Alberta", "lat": 50.0411, "lon": -110.6819, "tz": "America/Edmonton", "country": "Canada", "priority": 9},
        {"name": "Lethbridge, Alberta", "lat": 49.6934, "lon": -112.8414, "tz": "America/Edmonton", "country": "Canada", "priority": 9},
        {"name": "Cape Leeuwin, Australia", "lat": -34.3708, "lon": 115.1350, "tz": "Australia/Perth", "country": "Australia", "priority": 8},
        {"name": "Roaring Forties Zone, Southern Ocean", "lat": -45.0000, "lon": 150.0000, "tz": "Pacific/Auckland", "country": "International Waters", "priority": 8},
        {"name": "Cook Strait, New Zealand", "lat": -41.2000, "lon": 174.5000, "tz": "Pacific/Auckland", "country": "New Zealand", "priority": 8},
        {"name": "Foveaux Strait, New Zealand", "lat": -46.6000, "lon": 168.0000, "tz": "Pacific/Auckland", "country": "New Zealand", "priority": 8},
        {"name": "Bass Strait, Australia", "lat": -39.5000, "lon": 145.0000, "tz": "Australia/Melbourne", "country": "Australia", "priority": 8},
        {"name": "Port Lincoln, Australia", "lat": -34.7282, "lon": 135.8735, "tz": "Australia/Adelaide", "country": "Australia", "priority": 8},
        {"name": "Albany, Australia", "lat": -35.0269, "lon": 117.8840, "tz": "Australia/Perth", "country": "Australia", "priority": 8},
    ],
    "misty": [
        {"name": "Great Smoky Mountains, Tennessee", "lat": 35.6532, "lon": -83.5070, "tz": "America/New_York", "country": "United States", "priority": 10},
        {"name": "Pacific Northwest, Washington", "lat": 47.7511, "lon": -120.7401, "tz": "America/Los_Angeles", "country": "United States", "priority": 9},
        {"name": "Scottish Highlands", "lat": 57.0000, "lon": -4.0000, "tz": "Europe/London", "country": "United Kingdom", "priority": 8},
        {"name": "Lake District, England", "lat": 54.4609, "lon": -3.0886, "tz": "Europe/London", "country": "United Kingdom", "priority": 7},
        {"name": "Blue Ridge Mountains, Virginia", "lat": 38.5000, "lon": -78.5000, "tz": "America/New_York", "country": "United States", "priority": 10},
        {"name": "Shenandoah Valley, Virginia", "lat": 38.7184, "lon": -78.1694, "tz": "America/New_York", "country": "United States", "priority": 10},
        {"name": "Appalachian Mountains, North Carolina", "lat": 35.7596, "lon": -82.2644, "tz": "America/New_York", "country": "United States", "priority": 10},
        {"name": "Olympic Peninsula, Washington", "lat": 47.8021, "lon": -123.6044, "tz": "America/Los_Angeles", "country": "United States", "priority": 10},
        {"name": "Hoh Rainforest, Washington", "lat": 47.8606, "lon": -123.9348, "tz": "America/Los_Angeles", "country": "United States", "priority": 9},
        {"name": "Mount Rainier, Washington", "lat": 46.8523, "lon": -121.7603, "tz": "America/Los_Angeles", "country": "United States", "priority": 9},
        {"name": "Cascade Mountains, Oregon", "lat": 44.0000, "lon": -121.7000, "tz": "America/Los_Angeles", "country": "United States", "priority": 9},
        {"name": "Canadian Rockies, Alberta", "lat": 52.0000, "lon": -117.0000, "tz": "America/Edmonton", "country": "Canada", "priority": 9},
        {"name": "Coast Mountains, British Columbia", "lat": 51.0000, "lon": -125.0000, "tz": "America/Vancouver", "country": "Canada", "priority": 9},
        {"name": "Isle of Skye, Scotland", "lat": 57.2730, "lon": -6.2159, "tz": "Europe/London", "country": "United Kingdom", "priority": 9},
        {"name": "Ben Nevis, Scotland", "lat": 56.7969, "lon": -5.0037, "tz": "Europe/London", "country": "United Kingdom", "priority": 8},
        {"name": "Cairngorms, Scotland", "lat": 57.0833, "lon": -3.6667, "tz": "Europe/London", "country": "United Kingdom", "priority": 8},
        {"name": "Wicklow Mountains, Ireland", "lat": 53.0000, "lon": -6.4000, "tz": "Europe/Dublin", "country": "Ireland", "priority": 8},
        {"name": "Ring of Kerry, Ireland", "lat": 51.8661, "lon": -9.9297, "tz": "Europe/Dublin", "country": "Ireland", "priority": 8},
        {"name": "Dingle Peninsula, Ireland", "lat": 52.1400, "lon": -10.2700, "tz": "Europe/Dublin", "country": "Ireland", "priority": 8},
        {"name": "Black Forest, Germany", "lat": 48.0000, "lon": 8.2000, "tz": "Europe/Berlin", "country": "Germany", "priority": 8},
        {"name": "Vosges Mountains, France", "lat": 48.0000, "lon": 7.0000, "tz": "Europe/Paris", "country": "France", "priority": 8},
    ],
    "foggy": [
        {"name": "San Francisco, California", "lat": 37.7749, "lon": -122.4194, "tz": "America/Los_Angeles", "country": "United States", "priority": 10},
        {"name": "London, England", "lat": 51.5074, "lon": -0.1278, "tz": "Europe/London", "country": "United Kingdom", "priority": 9},
        {"name": "Seattle, Washington", "lat": 47.6062, "lon": -122.3321, "tz": "America/Los_Angeles", "country": "United States", "priority": 8},
        {"name": "Halifax, Nova Scotia", "lat": 44.6488, "lon": -63.5752, "tz": "America/Halifax", "country": "Canada", "priority": 7},
        {"name": "Grand Banks, Newfoundland", "lat": 44.5000, "lon": -50.0000, "tz": "America/St_Johns", "country": "Canada", "priority": 10},
        {"name": "Argentia, Newfoundland", "lat": 47.2967, "lon": -53.9769, "tz": "America/St_Johns", "country": "Canada", "priority": 10},
        {"name": "Point Reyes, California", "lat": 38.0370, "lon": -122.9581, "tz": "America/Los_Angeles", "country": "United States", "priority": 10},
        {"name": "Half Moon Bay, California", "lat": 37.4636, "lon": -122.4286, "tz": "America/Los_Angeles", "country": "United States", "priority": 10},
        {"name": "Mendocino, California", "lat": 39.3074, "lon": -123.7991, "tz": "America/Los_Angeles", "country": "United States", "priority": 9},
        {"name": "Eureka, California", "lat": 40.8021, "lon": -124.1637, "tz": "America/Los_Angeles", "country": "United States", "priority": 9},
        {"name": "Pacifica, California", "lat": 37.6138, "lon": -122.4869, "tz": "America/Los_Angeles", "country": "United States", "priority": 9},
        {"name": "Monterey, California", "lat": 36.6002, "lon": -121.8947, "tz": "America/Los_Angeles", "country": "United States", "priority": 9},
        {"name": "St. John's, Newfoundland", "lat": 47.5615, "lon": -52.7126, "tz": "America/St_Johns", "country": "Canada", "priority": 9},
        {"name": "Gander, Newfoundland", "lat": 48.9564, "lon": -54.6044, "tz": "America/St_Johns", "country": "Canada", "priority": 9},
        {"name": "Sable Island, Nova Scotia", "lat": 43.9340, "lon": -59.9149, "tz": "America/Halifax", "country": "Canada", "priority": 8},
        {"name": "Sydney, Nova Scotia", "lat": 46.1351, "lon": -60.1831, "tz": "America/Halifax", "country": "Canada", "priority": 8},
        {"name": "Yarmouth, Nova Scotia", "lat": 43.8374, "lon": -66.1175, "tz": "America/Halifax", "country": "Canada", "priority": 8},
        {"name": "Charlottetown, Prince Edward Island", "lat": 46.2382, "lon": -63.1311, "tz": "America/Halifax", "country": "Canada", "priority": 8},
        {"name": "Saint John, New Brunswick", "lat": 45.2733, "lon": -66.0633, "tz": "America/Halifax", "country": "Canada", "priority": 8},
        {"name": "Tofino, British Columbia", "lat": 49.1533, "lon": -125.9069, "tz": "America/Vancouver", "country": "Canada", "priority": 8},
        {"name": "Prince Rupert, British Columbia", "lat": 54.3150, "lon": -130.3209, "tz": "America/Vancouver", "country": "Canada", "priority": 8},
    ],
    "cloudy": [
        {"name": "Bergen, Norway", "lat": 60.3913, "lon": 5.3221, "tz": "Europe/Oslo", "country": "Norway", "priority": 10},
        {"name": "Reykjavik, Iceland", "lat": 64.1466, "lon": -21.9426, "tz": "Atlantic/Reykjavik", "country": "Iceland", "priority": 10},
        {"name": "Galway, Ireland", "lat": 53.2707, "lon": -9.0568, "tz": "Europe/Dublin", "country": "Ireland", "priority": 9},
        {"name": "Aberdeen, Scotland", "lat": 57.1497, "lon": -2.0943, "tz": "Europe/London", "country": "United Kingdom", "priority": 9},
        {"name": "Trondheim, Norway", "lat": 63.4305, "lon": 10.3951, "tz": "Europe/Oslo", "country": "Norway", "priority": 9},
        {"name": "Halifax, Nova Scotia", "lat": 44.6488, "lon": -63.5752, "tz": "America/Halifax", "country": "Canada", "priority": 9},
        {"name": "Gothenburg, Sweden", "lat": 57.7089, "lon": 11.9746, "tz": "Europe/Stockholm", "country": "Sweden", "priority": 9},
        {"name": "Amsterdam, Netherlands", "lat": 52.3676, "lon": 4.9041, "tz": "Europe/Amsterdam", "country": "Netherlands", "priority": 8},
        {"name": "Copenhagen, Denmark", "lat": 55.6761, "lon": 12.5683, "tz": "Europe/Copenhagen", "country": "Denmark", "priority": 8},
        {"name": "Akureyri, Iceland", "lat": 65.6835, "lon": -18.1262, "tz": "Atlantic/Reykjavik", "country": "Iceland", "priority": 8},
        {"name": "Cork, Ireland", "lat": 51.8985, "lon": -8.4756, "tz": "Europe/Dublin", "country": "Ireland", "priority": 8},
        {"name": "Newcastle, England", "lat": 54.9783, "lon": -1.6178, "tz": "Europe/London", "country": "United Kingdom", "priority": 8},
        {"name": "Bellingham, Washington", "lat": 48.7519, "lon": -122.4787, "tz": "America/Los_Angeles", "country": "United States", "priority": 8},
        {"name": "Olympia, Washington", "lat": 47.0379, "lon": -122.9015, "tz": "America/Los_Angeles", "country": "United States", "priority": 8},
    ],
}


SECONDARY_LOCATIONS = {
    "sunny": [
        {"name": "Rome, Italy", "lat": 41.9028, "lon": 12.4964, "tz": "Europe/Rome", "country": "Italy", "priority": 8},
        {"name": "Madrid, Spain", "lat": 40.4168, "lon": -3.7038, "tz": "Europe/Madrid", "country": "Spain", "priority": 7},
        {"name": "Lisbon, Portugal", "lat": 38.7223, "lon": -9.1393, "tz": "Europe/Lisbon", "country": "Portugal", "priority": 6},
        {"name": "Marseille, France", "lat": 43.2965, "lon": 5.3698, "tz": "Europe/Paris", "country": "France", "priority": 5},
        {"name": "Denver, Colorado", "lat": 39.7392, "lon": -104.9903, "tz": "America/Denver", "country": "United States", "priority": 8},
        {"name": "Austin, Texas", "lat": 30.2672, "lon": -97.7431, "tz": "America/Chicago", "country": "United States", "priority": 7},
        {"name": "Sacramento, California", "lat": 38.5816, "lon": -121.4944, "tz": "America/Los_Angeles", "country": "United States", "priority": 6},
        {"name": "Salt Lake City, Utah", "lat": 40.7608, "lon": -111.8910, "tz": "America/Denver", "country": "United States", "priority": 5},
        {"name": "Málaga, Spain", "lat": 36.7213, "lon": -4.4214, "tz": "Europe/Madrid", "country": "Spain", "priority": 7},
        {"name": "Alicante, Spain", "lat": 38.3452, "lon": -0.4810, "tz": "Europe/Madrid", "country": "Spain", "priority": 7},
        {"name": "Murcia, Spain", "lat": 37.9922, "lon": -1.1307, "tz": "Europe/Madrid", "country": "Spain", "priority": 7},
        {"name": "Córdoba, Spain", "lat": 37.8882, "lon": -4.7794, "tz": "Europe/Madrid", "country": "Spain", "priority": 7},
        {"name": "Faro, Portugal", "lat": 37.0194, "lon": -7.9322, "tz": "Europe/Lisbon", "country": "Portugal", "priority": 7},
        {"name": "Porto, Portugal", "lat": 41.1579, "lon": -8.6291, "tz": "Europe/Lisbon", "country": "Portugal", "priority": 7},
        {"name": "Naples, Italy", "lat": 40.8518, "lon": 14.2681, "tz": "Europe/Rome", "country": "Italy", "priority": 7},
        {"name": "Bari, Italy", "lat": 41.1171, "lon": 16.8719, "tz": "Europe/Rome", "country": "Italy", "priority": 7},
        {"name": "Cagliari, Italy", "lat": 39.2238, "lon": 9.1217, "tz": "Europe/Rome", "country": "Italy", "priority": 7},
        {"name": "Thessaloniki, Greece", "lat": 40.6401, "lon": 22.9444, "tz": "Europe/Athens", "country": "Greece", "priority": 7},
        {"name": "Patras, Greece", "lat": 38.2466, "lon": 21.7346, "tz": "Europe/Athens", "country": "Greece", "priority": 7},
        {"name": "Nicosia, Cyprus", "lat": 35.1856, "lon": 33.3823, "tz": "Asia/Nicosia", "country": "Cyprus", "priority": 7},
        {"name": "Limassol, Cyprus", "lat": 34.6823, "lon": 33.0464, "tz": "Asia/Nicosia", "country": "Cyprus", "priority": 7},
        {"name": "Split, Croatia", "lat": 43.5081, "lon": 16.4402, "tz": "Europe/Zagreb", "country": "Croatia", "priority": 6},
        {"name": "Dubrovnik, Croatia", "lat": 42.6507, "lon": 18.0944, "tz": "Europe/Zagreb", "country": "Croatia", "priority": 6},
        {"name": "Podgorica, Montenegro", "lat": 42.4411, "lon": 19.2636, "tz": "Europe/Podgorica", "country": "Montenegro", "priority": 6},
        {"name": "Tirana, Albania", "lat": 41.3275, "lon": 19.8187, "tz": "Europe/Tirane", "country": "Albania", "priority": 6},
        {"name": "Skopje, North Macedonia", "lat": 41.9973, "lon": 21.4280, "tz": "Europe/Skopje", "country": "North Macedonia", "priority": 6},
        {"name": "Valletta, Malta", "lat": 35.8989, "lon": 14.5146, "tz": "Europe/Malta", "country": "Malta", "priority": 6},
        {"name": "Paphos, Cyprus", "lat": 34.7571, "lon": 32.4225, "tz": "Asia/Nicosia", "country": "Cyprus", "priority": 6},
        {"name": "Bodrum, Turkey", "lat": 37.0344, "lon": 27.4305, "tz": "Europe/Istanbul", "country": "Turkey", "priority": 6},
        {"name": "Izmir, Turkey", "lat": 38.4237, "lon": 27.1428, "tz": "Europe/Istanbul", "country": "Turkey", "priority": 6},
        {"name": "Eilat, Israel", "lat": 29.5581, "lon": 34.9482, "tz": "Asia/Jerusalem", "country": "Israel", "priority": 6},
        {"name": "Haifa, Israel", "lat": 32.7940, "lon": 34.9896, "tz": "Asia/Jerusalem", "country": "Israel", "priority": 6},
        {"name": "Jerusalem, Israel", "lat": 31.7683, "lon": 35.2137, "tz": "Asia/Jerusalem", "country": "Israel", "priority": 6},
        {"name": "Beirut, Lebanon", "lat": 33.8938, "lon": 35.5018, "tz": "Asia/Beirut", "country": "Lebanon", "priority": 6},
        {"name": "Tunis, Tunisia", "lat": 36.8065, "lon": 10.1815, "tz": "Africa/Tunis", "country": "Tunisia", "priority": 6},
        {"name": "Algiers, Algeria", "lat": 36.7631, "lon": 3.0506, "tz": "Africa/Algiers", "country": "Algeria", "priority": 6},
        {"name": "Rabat, Morocco", "lat": 34.0181, "lon": -6.8186, "tz": "Africa/Casablanca", "country": "Morocco", "priority": 6},
        {"name": "Casablanca, Morocco", "lat": 33.5731, "lon": -7.5898, "tz": "Africa/Casablanca", "country": "Morocco", "priority": 6},
        {"name": "Brisbane, Australia", "lat": -27.4698, "lon": 153.0251, "tz": "Australia/Brisbane", "country": "Australia", "priority": 6},
        {"name": "Gold Coast, Australia", "lat": -28.0167, "lon": 153.4000, "tz": "Australia/Brisbane", "country": "Australia", "priority": 6},
        {"name": "Darwin, Australia", "lat": -12.4634, "lon": 130.8456, "tz": "Australia/Darwin", "country": "Australia", "priority": 6},
        {"name": "Durban, South Africa", "lat": -29.8587, "lon": 31.0218, "tz": "Africa/Johannesburg", "country": "South Africa", "priority": 6},
        {"name": "Port Elizabeth, South Africa", "lat": -33.9608, "lon": 25.6022, "tz": "Africa/Johannesburg", "country": "South Africa", "priority": 5},
        {"name": "Stellenbosch, South Africa", "lat": -33.9321, "lon": 18.8602, "tz": "Africa/Johannesburg", "country": "South Africa", "priority": 5},
        {"name": "Hermanus, South Africa", "lat": -34.4187, "lon": 19.2345, "tz": "Africa/Johannesburg", "country": "South Africa", "priority": 5},
        {"name": "Miami, Florida", "lat": 25.7617, "lon": -80.1918, "tz": "America/New_York", "country": "United States", "priority": 5},
        {"name": "Tampa, Florida", "lat": 27.9506, "lon": -82.4572, "tz": "America/New_York", "country": "United States", "priority": 5},
        {"name": "Orlando, Florida", "lat": 28.5383, "lon": -81.3792, "tz": "America/New_York", "country": "United States", "priority": 5},
        {"name": "Austin, Texas", "lat": 30.2672, "lon": -97.7431, "tz": "America/Chicago", "country": "United States", "priority": 5},
        {"name": "San Antonio, Texas", "lat": 29.4241, "lon": -98.4936, "tz": "America/Chicago", "country": "United States", "priority": 5},
    ],
    "rainy": [
        {"name": "Helsinki, Finland", "lat": 60.1699, "lon": 24.9384, "tz": "Europe/Helsinki", "country": "Finland", "priority": 8},
        {"name": "Stockholm, Sweden", "lat": 59.3293, "lon": 18.0686, "tz": "Europe/Stockholm", "country": "Sweden", "priority": 7},
        {"name": "Brussels, Belgium", "lat": 50.8503, "lon": 4.3517, "tz": "Europe/Brussels", "country": "Belgium", "priority": 6},
        {"name": "Prague, Czech Republic", "lat": 50.0755, "lon": 14.4378, "tz": "Europe/Prague", "country": "Czech Republic", "priority": 5},
        {"name": "Boston, Massachusetts", "lat": 42.3601, "lon": -71.0589, "tz": "America/New_York", "country": "United States", "priority": 8},
        {"name": "New York, New York", "lat": 40.7128, "lon": -74.0060, "tz": "America/New_York", "country": "United States", "priority": 7},
        {"name": "Atlanta, Georgia", "lat": 33.7490, "lon": -84.3880, "tz": "America/New_York", "country": "United States", "priority": 6},
        {"name": "Montreal, Canada", "lat": 45.5017, "lon": -73.5673, "tz": "America/Toronto", "country": "Canada", "priority": 5},
        {"name": "Guwahati, India", "lat": 26.1445, "lon": 91.7362, "tz": "Asia/Kolkata", "country": "India", "priority": 7},
        {"name": "Shillong, India", "lat": 25.5788, "lon": 91.8933, "tz": "Asia/Kolkata", "country": "India", "priority": 7},
        {"name": "Imphal, India", "lat": 24.8170, "lon": 93.9368, "tz": "Asia/Kolkata", "country": "India", "priority": 7},
        {"name": "Mangalore, India", "lat": 12.9141, "lon": 74.8560, "tz": "Asia/Kolkata", "country": "India", "priority": 7},
        {"name": "Udupi, India", "lat": 13.3409, "lon": 74.7421, "tz": "Asia/Kolkata", "country": "India", "priority": 7},
        {"name": "Goa, India", "lat": 15.2993, "lon": 74.1240, "tz": "Asia/Kolkata", "country": "India", "priority": 7},
        {"name": "Kandy, Sri Lanka", "lat": 7.2906, "lon": 80.6337, "tz": "Asia/Colombo", "country": "Sri Lanka", "priority": 7},
        {"name": "Chiang Mai, Thailand", "lat": 18.7883, "lon": 98.9853, "tz": "Asia/Bangkok", "country": "Thailand", "priority": 7},
        {"name": "Phuket, Thailand", "lat": 7.8804, "lon": 98.3923, "tz": "Asia/Bangkok", "country": "Thailand", "priority": 7},
        {"name": "Hanoi, Vietnam", "lat": 21.0285, "lon": 105.8542, "tz": "Asia/Ho_Chi_Minh", "country": "Vietnam", "priority": 7},
        {"name": "Jakarta, Indonesia", "lat": -6.2088, "lon": 106.8456, "tz": "Asia/Jakarta", "country": "Indonesia", "priority": 7},
        {"name": "Medan, Indonesia", "lat": 3.5952, "lon": 98.6722, "tz": "Asia/Jakarta", "country": "Indonesia", "priority": 7},
        {"name": "Palembang, Indonesia", "lat": -2.9761, "lon": 104.7754, "tz": "Asia/Jakarta", "country": "Indonesia", "priority": 7},
        {"name": "Padang, Indonesia", "lat": -0.9471, "lon": 100.4172, "tz": "Asia/Jakarta", "country": "Indonesia", "priority": 6},
        {"name": "Pontianak, Indonesia", "lat": -0.0263, "lon": 109.3425, "tz": "Asia/Pontianak", "country": "Indonesia", "priority": 6},
        {"name": "Banjarmasin, Indonesia", "lat": -3.3194, "lon": 114.5906, "tz": "Asia/Pontianak", "country": "Indonesia", "priority": 6},
        {"name": "Kuching, Malaysia", "lat": 1.5535, "lon": 110.3593, "tz": "Asia/Kuching", "country": "Malaysia", "priority": 6},
        {"name": "Kota Kinabalu, Malaysia", "lat": 5.9749, "lon": 116.0724, "tz": "Asia/Kuching", "country": "Malaysia", "priority": 6},
        {"name": "Ipoh, Malaysia", "lat": 4.5975, "lon": 101.0901, "tz": "Asia/Kuala_Lumpur", "country": "Malaysia", "priority": 6},
        {"name": "Johor Bahru, Malaysia", "lat": 1.4655, "lon": 103.7578, "tz": "Asia/Kuala_Lumpur", "country": "Malaysia", "priority": 6},
        {"name": "Mandalay, Myanmar", "lat": 21.9588, "lon": 96.0891, "tz": "Asia/Yangon", "country": "Myanmar", "priority": 6},
        {"name": "Manila, Philippines", "lat": 14.5995, "lon": 120.9842, "tz": "Asia/Manila", "country": "Philippines", "priority": 6},
        {"name": "Cebu City, Philippines", "lat": 10.3157, "lon": 123.8854, "tz": "Asia/Manila", "country": "Philippines", "priority": 6},
        {"name": "Davao, Philippines", "lat": 7.0731, "lon": 125.6128, "tz": "Asia/Manila", "country": "Philippines", "priority": 6},
        {"name": "Cagayan de Oro, Philippines", "lat": 8.4542, "lon": 124.6319, "tz": "Asia/Manila", "country": "Philippines", "priority": 6},
        {"name": "Iquitos, Peru", "lat": -3.7437, "lon": -73.2516, "tz": "America/Lima", "country": "Peru", "priority": 6},
        {"name": "Puerto Maldonado, Peru", "lat": -12.5931, "lon": -69.1892, "tz": "America/Lima", "country": "Peru", "priority": 6},
        {"name": "Santarém, Brazil", "lat": -2.4426, "lon": -54.7083, "tz": "America/Santarem", "country": "Brazil", "priority": 6},
        {"name": "Macapá, Brazil", "lat": 0.0349, "lon": -51.0694, "tz": "America/Belem", "country": "Brazil", "priority": 6},
        {"name": "São Luís, Brazil", "lat": -2.5307, "lon": -44.3068, "tz": "America/Fortaleza", "country": "Brazil", "priority": 6},
        {"name": "Fortaleza, Brazil", "lat": -3.7319, "lon": -38.5267, "tz": "America/Fortaleza", "country": "Brazil", "priority": 6},
        {"name": "Salvador, Brazil", "lat": -12.9714, "lon": -38.5014, "tz": "America/Bahia", "country": "Brazil", "priority": 5},
        {"name": "Recife, Brazil", "lat": -8.0476, "lon": -34.8770, "tz": "America/Recife", "country": "Brazil", "priority": 5},
        {"name": "Georgetown, Guyana", "lat": 6.8013, "lon": -58.1551, "tz": "America/Guyana", "country": "Guyana", "priority": 5},
        {"name": "Paramaribo, Suriname", "lat": 5.8520, "lon": -55.2038, "tz": "America/Paramaribo", "country": "Suriname", "priority": 5},
        {"name": "Cayenne, French Guiana", "lat": 4.9375, "lon": -52.3069, "tz": "America/Cayenne", "country": "French Guiana", "priority": 5},
        {"name": "Guayaquil, Ecuador", "lat": -2.1894, "lon": -79.8890, "tz": "America/Guayaquil", "country": "Ecuador", "priority": 5},
    ],
    "stormy": [
        {"name": "London, England", "lat": 51.5074, "lon": -0.1278, "tz": "Europe/London", "country": "United Kingdom", "priority": 8},
        {"name": "Amsterdam, Netherlands", "lat": 52.3676, "lon": 4.9041, "tz": "Europe/Amsterdam", "country": "Netherlands", "priority": 7},
        {"name": "Dublin, Ireland", "lat": 53.3498, "lon": -6.2603, "tz": "Europe/Dublin", "country": "Ireland", "priority": 6},
        {"name": "Copenhagen, Denmark", "lat": 55.6761, "lon": 12.5683, "tz": "Europe/Copenhagen", "country": "Denmark", "priority": 5},
        {"name": "Oklahoma City, Oklahoma", "lat": 35.4676, "lon": -97.5164, "tz": "America/Chicago", "country": "United States", "priority": 8},
        {"name": "Kansas City, Missouri", "lat": 39.0997, "lon": -94.5786, "tz": "America/Chicago", "country": "United States", "priority": 7},
        {"name": "Dallas, Texas", "lat": 32.7767, "lon": -96.7970, "tz": "America/Chicago", "country": "United States", "priority": 6},
        {"name": "Nashville, Tennessee", "lat": 36.1627, "lon": -86.7816, "tz": "America/Chicago", "country": "United States", "priority": 5},
        {"name": "Lincoln, Nebraska", "lat": 40.8136, "lon": -96.7026, "tz": "America/Chicago", "country": "United States", "priority": 7},
        {"name": "Omaha, Nebraska", "lat": 41.2565, "lon": -95.9345, "tz": "America/Chicago", "country": "United States", "priority": 7},
        {"name": "Des Moines, Iowa", "lat": 41.5868, "lon": -93.6250, "tz": "America/Chicago", "country": "United States", "priority": 7},
        {"name": "Little Rock, Arkansas", "lat": 34.7465, "lon": -92.2896, "tz": "America/Chicago", "country": "United States", "priority": 7},
        {"name": "Shreveport, Louisiana", "lat": 32.5252, "lon": -93.7502, "tz": "America/Chicago", "country": "United States", "priority": 7},
        {"name": "Lubbock, Texas", "lat": 33.5779, "lon": -101.8552, "tz": "America/Chicago", "country": "United States", "priority": 7},
        {"name": "Abilene, Texas", "lat": 32.4487, "lon": -99.7331, "tz": "America/Chicago", "country": "United States", "priority": 7},
        {"name": "Waco, Texas", "lat": 31.5494, "lon": -97.1467, "tz": "America/Chicago", "country": "United States", "priority": 7},
        {"name": "Birmingham, Alabama", "lat": 33.5186, "lon": -86.8104, "tz": "America/Chicago", "country": "United States", "priority": 6},
        {"name": "Huntsville, Alabama", "lat": 34.7304, "lon": -86.5861, "tz": "America/Chicago", "country": "United States", "priority": 6},
        {"name": "Jackson, Mississippi", "lat": 32.2988, "lon": -90.1848, "tz": "America/Chicago", "country": "United States", "priority": 6},
        {"name": "Memphis, Tennessee", "lat": 35.1495, "lon": -90.0490, "tz": "America/Chicago", "country": "United States", "priority": 6},
        {"name": "Nashville, Tennessee", "lat": 36.1627, "lon": -86.7816, "tz": "America/Chicago", "country": "United States", "priority": 6},
        {"name": "Atlanta, Georgia", "lat": 33.7490, "lon": -84.3880, "tz": "America/New_York", "country": "United States", "priority": 6},
        {"name": "Inverness, Scotland", "lat": 57.4778, "lon": -4.2247, "tz": "Europe/London", "country": "United Kingdom", "priority": 6},
        {"name": "Fort William, Scotland", "lat": 56.8198, "lon": -5.1052, "tz": "Europe/London", "country": "United Kingdom", "priority": 6},
        {"name": "Glasgow, Scotland", "lat": 55.8642, "lon": -4.2518, "tz": "Europe/London", "country": "United Kingdom", "priority": 6},
        {"name": "Edinburgh, Scotland", "lat": 55.9533, "lon": -3.1883, "tz": "Europe/London", "country": "United Kingdom", "priority": 6},
        {"name": "Newcastle, England", "lat": 54.9783, "lon": -1.6178, "tz": "Europe/London", "country": "United Kingdom", "priority": 6},
        {"name": "Liverpool, England", "lat": 53.4084, "lon": -2.9916, "tz": "Europe/London", "country": "United Kingdom", "priority": 6},
        {"name": "Belfast, Northern Ireland", "lat": 54.5973, "lon": -5.9301, "tz": "Europe/London", "country": "United Kingdom", "priority": 6},
        {"name": "Cork, Ireland", "lat": 51.8985, "lon": -8.4756, "tz": "Europe/Dublin", "country": "Ireland", "priority": 6},
        {"name": "Galway, Ireland", "lat": 53.2707, "lon": -9.0568, "tz": "Europe/Dublin", "country": "Ireland", "priority": 6},
        {"name": "Hamburg, Germany", "lat": 53.5511, "lon": 9.9937, "tz": "Europe/Berlin", "country": "Germany", "priority": 5},
        {"name": "Bremen, Germany", "lat": 53.0793, "lon": 8.8017, "tz": "Europe/Berlin", "country": "Germany", "priority": 5},
        {"name": "Gothenburg, Sweden", "lat": 57.7089, "lon": 11.9746, "tz": "Europe/Stockholm", "country": "Sweden", "priority": 5},
        {"name": "Malmö, Sweden", "lat": 55.6050, "lon": 13.0038, "tz": "Europe/Stockholm", "country": "Sweden", "priority": 5},
        {"name": "Aarhus, Denmark", "lat": 56.1629, "lon": 10.2039, "tz": "Europe/Copenhagen", "country": "Denmark", "priority": 5},
        {"name": "Esbjerg, Denmark", "lat": 55.4719, "lon": 8.4515, "tz": "Europe/Copenhagen", "country": "Denmark", "priority": 5},
    ],
    "snowy": [
        {"name": "Montreal, Canada", "lat": 45.5017, "lon": -73.5673, "tz": "America/Toronto", "country": "Canada", "priority": 8},
        {"name": "Toronto, Canada", "lat": 43.6532, "lon": -79.3832, "tz": "America/Toronto", "country": "Canada", "priority": 7},
        {"name": "Vancouver, Canada", "lat": 49.2827, "lon": -123.1207, "tz": "America/Vancouver", "country": "Canada", "priority": 6},
        {"name": "Calgary, Canada", "lat": 51.0447, "lon": -114.0719, "tz": "America/Edmonton", "country": "Canada", "priority": 5},
        {"name": "Churchill, Manitoba", "lat": 58.7684, "lon": -94.1647, "tz": "America/Winnipeg", "country": "Canada", "priority": 7},
        {"name": "Thompson, Manitoba", "lat": 55.7435, "lon": -97.8558, "tz": "America/Winnipeg", "country": "Canada", "priority": 7},
        {"name": "The Pas, Manitoba", "lat": 53.8251, "lon": -101.2541, "tz": "America/Winnipeg", "country": "Canada", "priority": 7},
        {"name": "Fort McMurray, Alberta", "lat": 56.7267, "lon": -111.3790, "tz": "America/Edmonton", "country": "Canada", "priority": 7},
        {"name": "Prince George, British Columbia", "lat": 53.9171, "lon": -122.7497, "tz": "America/Vancouver", "country": "Canada", "priority": 7},
        {"name": "Dawson City, Yukon", "lat": 64.0601, "lon": -139.4329, "tz": "America/Dawson", "country": "Canada", "priority": 7},
        {"name": "Resolute, Nunavut", "lat": 74.6956, "lon": -94.8295, "tz": "America/Resolute", "country": "Canada", "priority": 7},
        {"name": "Grise Fiord, Nunavut", "lat": 76.4219, "lon": -82.9019, "tz": "America/Toronto", "country": "Canada", "priority": 7},
        {"name": "Pond Inlet, Nunavut", "lat": 72.6989, "lon": -77.9653, "tz": "America/Toronto", "country": "Canada", "priority": 7},
        {"name": "Narvik, Norway", "lat": 68.4384, "lon": 17.4272, "tz": "Europe/Oslo", "country": "Norway", "priority": 7},
        {"name": "Alta, Norway", "lat": 69.9689, "lon": 23.2717, "tz": "Europe/Oslo", "country": "Norway", "priority": 7},
        {"name": "Hammerfest, Norway", "lat": 70.6636, "lon": 23.6823, "tz": "Europe/Oslo", "country": "Norway", "priority": 7},
        {"name": "Karasjok, Norway", "lat": 69.4667, "lon": 25.5167, "tz": "Europe/Oslo", "country": "Norway", "priority": 6},
        {"name": "Trondheim, Norway", "lat": 63.4305, "lon": 10.3951, "tz": "Europe/Oslo", "country": "Norway", "priority": 6},
        {"name": "Bergen, Norway", "lat": 60.3913, "lon": 5.3221, "tz": "Europe/Oslo", "country": "Norway", "priority": 6},
        {"name": "Lillehammer, Norway", "lat": 61.1153, "lon": 10.4662, "tz": "Europe/Oslo", "country": "Norway", "priority": 6},
        {"name": "Luleå, Sweden", "lat": 65.5848, "lon": 22.1547, "tz": "Europe/Stockholm", "country": "Sweden", "priority": 6},
        {"name": "Östersund, Sweden", "lat": 63.1792, "lon": 14.6357, "tz": "Europe/Stockholm", "country": "Sweden", "priority": 6},
        {"name": "Umeå, Sweden", "lat": 63.8258, "lon": 20.2630, "tz": "Europe/Stockholm", "country": "Sweden", "priority": 6},
        {"name": "Sundsvall, Sweden", "lat": 62.3908, "lon": 17.3069, "tz": "Europe/Stockholm", "country": "Sweden", "priority": 6},
        {"name": "Ivalo, Finland", "lat": 68.6564, "lon": 27.5461, "tz": "Europe/Helsinki", "country": "Finland", "priority": 6},
        {"name": "Sodankylä, Finland", "lat": 67.4179, "lon": 26.6009, "tz": "Europe/Helsinki", "country": "Finland", "priority": 6},
        {"name": "Kemi, Finland", "lat": 65.7367, "lon": 24.5658, "tz": "Europe/Helsinki", "country": "Finland", "priority": 6},
        {"name": "Oulu, Finland", "lat": 65.0121, "lon": 25.4651, "tz": "Europe/Helsinki", "country": "Finland", "priority": 6},
        {"name": "Kuopio, Finland", "lat": 62.8924, "lon": 27.6780, "tz": "Europe/Helsinki", "country": "Finland", "priority": 5},
        {"name": "Jyväskylä, Finland", "lat": 62.2426, "lon": 25.7473, "tz": "Europe/Helsinki", "country": "Finland", "priority": 5},
        {"name": "Tampere, Finland", "lat": 61.4991, "lon": 23.7871, "tz": "Europe/Helsinki", "country": "Finland", "priority": 5},
        {"name": "Akureyri, Iceland", "lat": 65.6835, "lon": -18.1262, "tz": "Atlantic/Reykjavik", "country": "Iceland", "priority": 5},
        {"name": "Isafjordur, Iceland", "lat": 66.0749, "lon": -23.1339, "tz": "Atlantic/Reykjavik", "country": "Iceland", "priority": 5},
        {"name": "Egilsstadir, Iceland", "lat": 65.2637, "lon": -14.3944, "tz": "Atlantic/Reykjavik", "country": "Iceland", "priority": 5},
        {"name": "Interlaken, Switzerland", "lat": 46.6863, "lon": 7.8632, "tz": "Europe/Zurich", "country": "Switzerland", "priority": 5},
        {"name": "Grindelwald, Switzerland", "lat": 46.6244, "lon": 8.0411, "tz": "Europe/Zurich", "country": "Switzerland", "priority": 5},
        {"name": "Verbier, Switzerland", "lat": 46.0964, "lon": 7.2283, "tz": "Europe/Zurich", "country": "Switzerland", "priority": 5},
        {"name": "Salzburg, Austria", "lat": 47.8095, "lon": 13.0550, "tz": "Europe/Vienna", "country": "Austria", "priority": 5},
        {"name": "Kitzbühel, Austria", "lat": 47.4467, "lon": 12.3928, "tz": "Europe/Vienna", "country": "Austria", "priority": 5},
    ],
    "breezy": [
        {"name": "Boston, Massachusetts", "lat": 42.3601, "lon": -71.0589, "tz": "America/New_York", "country": "United States", "priority": 8},
        {"name": "Miami, Florida", "lat": 25.7617, "lon": -80.1918, "tz": "America/New_York", "country": "United States", "priority": 7},
        {"name": "Copenhagen, Denmark", "lat": 55.6761, "lon": 12.5683, "tz": "Europe/Copenhagen", "country": "Denmark", "priority": 6},
        {"name": "Dublin, Ireland", "lat": 53.3498, "lon": -6.2603, "tz": "Europe/Dublin", "country": "Ireland", "priority": 5},
        {"name": "Galveston, Texas", "lat": 29.3013, "lon": -94.7977, "tz": "America/Chicago", "country": "United States", "priority": 7},
        {"name": "South Padre Island, Texas", "lat": 26.0739, "lon": -97.1631, "tz": "America/Chicago", "country": "United States", "priority": 7},
        {"name": "Key West, Florida", "lat": 25.7617, "lon": -81.8018, "tz": "America/New_York", "country": "United States", "priority": 7},
        {"name": "Cape Hatteras, North Carolina", "lat": 35.2079, "lon": -75.6274, "tz": "America/New_York", "country": "United States", "priority": 7},
        {"name": "Outer Banks, North Carolina", "lat": 35.5000, "lon": -75.5000, "tz": "America/New_York", "country": "United States", "priority": 7},
        {"name": "Nantucket, Massachusetts", "lat": 41.2835, "lon": -70.0995, "tz": "America/New_York", "country": "United States", "priority": 7},
        {"name": "Martha's Vineyard, Massachusetts", "lat": 41.3811, "lon": -70.6109, "tz": "America/New_York", "country": "United States", "priority": 7},
        {"name": "Block Island, Rhode Island", "lat": 41.1677, "lon": -71.5826, "tz": "America/New_York", "country": "United States", "priority": 7},
        {"name": "Montauk Point, New York", "lat": 41.0717, "lon": -71.8571, "tz": "America/New_York", "country": "United States", "priority": 7},
        {"name": "Cape Cod, Massachusetts", "lat": 41.6688, "lon": -70.2962, "tz": "America/New_York", "country": "United States", "priority": 7},
        {"name": "Myrtle Beach, South Carolina", "lat": 33.6891, "lon": -78.8867, "tz": "America/New_York", "country": "United States", "priority": 6},
        {"name": "Virginia Beach, Virginia", "lat": 36.8529, "lon": -75.9780, "tz": "America/New_York", "country": "United States", "priority": 6},
        {"name": "Ocean City, Maryland", "lat": 38.3365, "lon": -75.0849, "tz": "America/New_York", "country": "United States", "priority": 6},
        {"name": "Atlantic City, New Jersey", "lat": 39.3643, "lon": -74.4229, "tz": "America/New_York", "country": "United States", "priority": 6},
        {"name": "Long Beach Island, New Jersey", "lat": 39.6426, "lon": -74.1932, "tz": "America/New_York", "country": "United States", "priority": 6},
        {"name": "Santa Barbara, California", "lat": 34.4208, "lon": -119.6982, "tz": "America/Los_Angeles", "country": "United States", "priority": 6},
        {"name": "Ventura, California", "lat": 34.2747, "lon": -119.2287, "tz": "America/Los_Angeles", "country": "United States", "priority": 6},
        {"name": "Morro Bay, California", "lat": 35.3658, "lon": -120.8493, "tz": "America/Los_Angeles", "country": "United States", "priority": 6},
        {"name": "Pismo Beach, California", "lat": 35.1428, "lon": -120.6413, "tz": "America/Los_Angeles", "country": "United States", "priority": 6},
        {"name": "San Luis Obispo, California", "lat": 35.2828, "lon": -120.6596, "tz": "America/Los_Angeles", "country": "United States", "priority": 6},
        {"name": "Regina, Saskatchewan", "lat": 50.4452, "lon": -104.6189, "tz": "America/Regina", "country": "Canada", "priority": 6},
        {"name": "Saskatoon, Saskatchewan", "lat": 52.1332, "lon": -106.6700, "tz": "America/Regina", "country": "Canada", "priority": 6},
        {"name": "Swift Current, Saskatchewan", "lat": 50.2881, "lon": -107.7943, "tz": "America/Regina", "country": "Canada", "priority": 6},
        {"name": "Brandon, Manitoba", "lat": 49.8481, "lon": -99.9308, "tz": "America/Winnipeg", "country": "Canada", "priority": 5},
        {"name": "Portage la Prairie, Manitoba", "lat": 49.9731, "lon": -98.2914, "tz": "America/Winnipeg", "country": "Canada", "priority": 5},
        {"name": "North Battleford, Saskatchewan", "lat": 52.7575, "lon": -108.2862, "tz": "America/Regina", "country": "Canada", "priority": 5},
        {"name": "Yorkton, Saskatchewan", "lat": 51.2139, "lon": -102.4628, "tz": "America/Regina", "country": "Canada", "priority": 5},
    ],
    "misty": [
        {"name": "Yorkshire Dales, England", "lat": 54.3000, "lon": -2.0000, "tz": "Europe/London", "country": "United Kingdom", "priority": 8},
        {"name": "Peak District, England", "lat": 53.3000, "lon": -1.8000, "tz": "Europe/London", "country": "United Kingdom", "priority": 7},
        {"name": "Dartmoor, England", "lat": 50.5700, "lon": -3.9300, "tz": "Europe/London", "country": "United Kingdom", "priority": 6},
        {"name": "Brecon Beacons, Wales", "lat": 51.8833, "lon": -3.4333, "tz": "Europe/London", "country": "United Kingdom", "priority": 5},
        {"name": "Adirondack Mountains, New York", "lat": 44.0000, "lon": -74.0000, "tz": "America/New_York", "country": "United States", "priority": 7},
        {"name": "Green Mountains, Vermont", "lat": 44.0000, "lon": -72.8000, "tz": "America/New_York", "country": "United States", "priority": 7},
        {"name": "White Mountains, New Hampshire", "lat": 44.2700, "lon": -71.3000, "tz": "America/New_York", "country": "United States", "priority": 7},
        {"name": "Catskill Mountains, New York", "lat": 42.0000, "lon": -74.3000, "tz": "America/New_York", "country": "United States", "priority": 7},
        {"name": "Finger Lakes, New York", "lat": 42.6000, "lon": -76.8000, "tz": "America/New_York", "country": "United States", "priority": 7},
        {"name": "Pocono Mountains, Pennsylvania", "lat": 41.1000, "lon": -75.3000, "tz": "America/New_York", "country": "United States", "priority": 7},
        {"name": "Ozark Mountains, Arkansas", "lat": 36.0000, "lon": -92.5000, "tz": "America/Chicago", "country": "United States", "priority": 6},
        {"name": "Ouachita Mountains, Arkansas", "lat": 34.7000, "lon": -94.0000, "tz": "America/Chicago", "country": "United States", "priority": 6},
        {"name": "Laurentian Mountains, Quebec", "lat": 46.0000, "lon": -74.0000, "tz": "America/Toronto", "country": "Canada", "priority": 6},
        {"name": "Algonquin Park, Ontario", "lat": 45.5000, "lon": -78.0000, "tz": "America/Toronto", "country": "Canada", "priority": 6},
        {"name": "Muskoka Region, Ontario", "lat": 45.0000, "lon": -79.5000, "tz": "America/Toronto", "country": "Canada", "priority": 6},
        {"name": "Georgian Bay, Ontario", "lat": 45.3000, "lon": -80.2000, "tz": "America/Toronto", "country": "Canada", "priority": 6},
        {"name": "Snowdonia, Wales", "lat": 53.0000, "lon": -3.9000, "tz": "Europe/London", "country": "United Kingdom", "priority": 6},
        {"name": "Pembrokeshire Coast, Wales", "lat": 51.7000, "lon": -5.0000, "tz": "Europe/London", "country": "United Kingdom", "priority": 6},
        {"name": "Northumberland National Park, England", "lat": 55.3000, "lon": -2.0000, "tz": "Europe/London", "country": "United Kingdom", "priority": 6},
        {"name": "Exmoor, England", "lat": 51.1000, "lon": -3.7000, "tz": "Europe/London", "country": "United Kingdom", "priority": 6},
        {"name": "Forest of Bowland, England", "lat": 53.9000, "lon": -2.5000, "tz": "Europe/London", "country": "United Kingdom", "priority": 5},
        {"name": "Pennines, England", "lat": 54.5000, "lon": -2.0000, "tz": "Europe/London", "country": "United Kingdom", "priority": 5},
        {"name": "Trossachs, Scotland", "lat": 56.2500, "lon": -4.3000, "tz": "Europe/London", "country": "United Kingdom", "priority": 5},
        {"name": "Loch Lomond, Scotland", "lat": 56.1000, "lon": -4.6000, "tz": "Europe/London", "country": "United Kingdom", "priority": 5},
        {"name": "Sperrin Mountains, Northern Ireland", "lat": 54.7000, "lon": -7.0000, "tz": "Europe/London", "country": "United Kingdom", "priority": 5},
        {"name": "Mourne Mountains, Northern Ireland", "lat": 54.1700, "lon": -6.0000, "tz": "Europe/London", "country": "United Kingdom", "priority": 5},
        {"name": "Burren, Ireland", "lat": 53.0000, "lon": -9.0000, "tz": "Europe/Dublin", "country": "Ireland", "priority": 5},
        {"name": "Connemara, Ireland", "lat": 53.5000, "lon": -9.7000, "tz": "Europe/Dublin", "country": "Ireland", "priority": 5},
        {"name": "Donegal Highlands, Ireland", "lat": 54.8000, "lon": -8.0000, "tz": "Europe/Dublin", "country": "Ireland", "priority": 5},
    ],
    "foggy": [
        {"name": "Portland, Oregon", "lat": 45.5152, "lon": -122.6784, "tz": "America/Los_Angeles", "country": "United States", "priority": 8},
        {"name": "Vancouver, Canada", "lat": 49.2827, "lon": -123.1207, "tz": "America/Vancouver", "country": "Canada", "priority": 7},
        {"name": "Dublin, Ireland", "lat": 53.3498, "lon": -6.2603, "tz": "Europe/Dublin", "country": "Ireland", "priority": 6},
        {"name": "Edinburgh, Scotland", "lat": 55.9533, "lon": -3.1883, "tz": "Europe/London", "country": "United Kingdom", "priority": 5},
        {"name": "Bodega Bay, California", "lat": 38.3330, "lon": -123.0469, "tz": "America/Los_Angeles", "country": "United States", "priority": 7},
        {"name": "Sausalito, California", "lat": 37.8590, "lon": -122.4852, "tz": "America/Los_Angeles", "country": "United States", "priority": 7},
        {"name": "Mill Valley, California", "lat": 37.9061, "lon": -122.5450, "tz": "America/Los_Angeles", "country": "United States", "priority": 7},
        {"name": "Santa Cruz, California", "lat": 36.9741, "lon": -122.0308, "tz": "America/Los_Angeles", "country": "United States", "priority": 7},
        {"name": "Carmel-by-the-Sea, California", "lat": 36.5553, "lon": -121.9233, "tz": "America/Los_Angeles", "country": "United States", "priority": 7},
        {"name": "Big Sur, California", "lat": 36.2704, "lon": -121.8081, "tz": "America/Los_Angeles", "country": "United States", "priority": 7},
        {"name": "Crescent City, California", "lat": 41.7558, "lon": -124.2026, "tz": "America/Los_Angeles", "country": "United States", "priority": 7},
        {"name": "Astoria, Oregon", "lat": 46.1879, "lon": -123.8313, "tz": "America/Los_Angeles", "country": "United States", "priority": 7},
        {"name": "Cannon Beach, Oregon", "lat": 45.8918, "lon": -123.9615, "tz": "America/Los_Angeles", "country": "United States", "priority": 7},
        {"name": "Newport, Oregon", "lat": 44.6365, "lon": -124.0533, "tz": "America/Los_Angeles", "country": "United States", "priority": 7},
        {"name": "Florence, Oregon", "lat": 43.9829, "lon": -124.1045, "tz": "America/Los_Angeles", "country": "United States", "priority": 7},
        {"name": "Bandon, Oregon", "lat": 43.1193, "lon": -124.4087, "tz": "America/Los_Angeles", "country": "United States", "priority": 6},
        {"name": "Brookings, Oregon", "lat": 42.0526, "lon": -124.2837, "tz": "America/Los_Angeles", "country": "United States", "priority": 6},
        {"name": "Bellingham, Washington", "lat": 48.7519, "lon": -122.4787, "tz": "America/Los_Angeles", "country": "United States", "priority": 6},
        {"name": "Olympia, Washington", "lat": 47.0379, "lon": -122.9015, "tz": "America/Los_Angeles", "country": "United States", "priority": 6},
        {"name": "Port Angeles, Washington", "lat": 48.1181, "lon": -123.4307, "tz": "America/Los_Angeles", "country": "United States", "priority": 6},
        {"name": "La Push, Washington", "lat": 47.9037, "lon": -124.6351, "tz": "America/Los_Angeles", "country": "United States", "priority": 6},
        {"name": "Westport, Washington", "lat": 46.8812, "lon": -124.1051, "tz": "America/Los_Angeles", "country": "United States", "priority": 6},
        {"name": "Ucluelet, British Columbia", "lat": 48.9367, "lon": -125.5433, "tz": "America/Vancouver", "country": "Canada", "priority": 6},
        {"name": "Bamfield, British Columbia", "lat": 48.8356, "lon": -125.1356, "tz": "America/Vancouver", "country": "Canada", "priority": 6},
        {"name": "Port Alberni, British Columbia", "lat": 49.2342, "lon": -124.8054, "tz": "America/Vancouver", "country": "Canada", "priority": 6},
        {"name": "Nanaimo, British Columbia", "lat": 49.1659, "lon": -123.9401, "tz": "America/Vancouver", "country": "Canada", "priority": 6},
        {"name": "Victoria, British Columbia", "lat": 48.4284, "lon": -123.3656, "tz": "America/Vancouver", "country": "Canada", "priority": 6},
        {"name": "Fredericton, New Brunswick", "lat": 45.9636, "lon": -66.6431, "tz": "America/Halifax", "country": "Canada", "priority": 5},
        {"name": "Moncton, New Brunswick", "lat": 46.0878, "lon": -64.7782, "tz": "America/Halifax", "country": "Canada", "priority": 5},
        {"name": "Bathurst, New Brunswick", "lat": 47.6187, "lon": -65.6506, "tz": "America/Halifax", "country": "Canada", "priority": 5},
        {"name": "Corner Brook, Newfoundland", "lat": 48.9500, "lon": -57.9522, "tz": "America/St_Johns", "country": "Canada", "priority": 5},
        {"name": "Port aux Basques, Newfoundland", "lat": 47.5703, "lon": -59.1378, "tz": "America/St_Johns", "country": "Canada", "priority": 5},
        {"name": "Happy Valley-Goose Bay, Labrador", "lat": 53.3168, "lon": -60.4259, "tz": "America/Goose_Bay", "country": "Canada", "priority": 5},
    ],
    "cloudy": [
        {"name": "Lille, France", "lat": 50.6292, "lon": 3.0573, "tz": "Europe/Paris", "country": "France", "priority": 7},
        {"name": "Antwerp, Belgium", "lat": 51.2194, "lon": 4.4025, "tz": "Europe/Brussels", "country": "Belgium", "priority": 7},
        {"name": "Hamburg, Germany", "lat": 53.5511, "lon": 9.9937, "tz": "Europe/Berlin", "country": "Germany", "priority": 7},
        {"name": "Düsseldorf, Germany", "lat": 51.2277, "lon": 6.7735, "tz": "Europe/Berlin", "country": "Germany", "priority": 7},
        {"name": "Cardiff, Wales", "lat": 51.4816, "lon": -3.1791, "tz": "Europe/London", "country": "United Kingdom", "priority": 7},
        {"name": "Malmö, Sweden", "lat": 55.6050, "lon": 13.0038, "tz": "Europe/Stockholm", "country": "Sweden", "priority": 7},
        {"name": "Aarhus, Denmark", "lat": 56.1629, "lon": 10.2039, "tz": "Europe/Copenhagen", "country": "Denmark", "priority": 7},
        {"name": "St. John's, Newfoundland", "lat": 47.5615, "lon": -52.7126, "tz": "America/St_Johns", "country": "Canada", "priority": 7},
        {"name": "Portland, Oregon", "lat": 45.5152, "lon": -122.6784, "tz": "America/Los_Angeles", "country": "United States", "priority": 7},
        {"name": "Eugene, Oregon", "lat": 44.0521, "lon": -123.0868, "tz": "America/Los_Angeles", "country": "United States", "priority": 7},
        {"name": "Inverness, Scotland", "lat": 57.4778, "lon": -4.2247, "tz": "Europe/London", "country": "United Kingdom", "priority": 6},
        {"name": "Plymouth, England", "lat": 50.3755, "lon": -4.1427, "tz": "Europe/London", "country": "United Kingdom", "priority": 6},
        {"name": "Kanazawa, Japan", "lat": 36.5944, "lon": 136.6256, "tz": "Asia/Tokyo", "country": "Japan", "priority": 6},
        {"name": "Niigata, Japan", "lat": 37.9026, "lon": 139.0232, "tz": "Asia/Tokyo", "country": "Japan", "priority": 6},
        {"name": "Sapporo, Japan", "lat": 43.0642, "lon": 141.3469, "tz": "Asia/Tokyo", "country": "Japan", "priority": 6},
        {"name": "Rotterdam, Netherlands", "lat": 51.9244, "lon": 4.4777, "tz": "Europe/Amsterdam", "country": "Netherlands", "priority": 6},
        {"name": "Tallinn, Estonia", "lat": 59.4370, "lon": 24.7536, "tz": "Europe/Tallinn", "country": "Estonia", "priority": 6},
        {"name": "Riga, Latvia", "lat": 56.9496, "lon": 24.1052, "tz": "Europe/Riga", "country": "Latvia", "priority": 6},
        {"name": "Syracuse, New York", "lat": 43.0481, "lon": -76.1474, "tz": "America/New_York", "country": "United States", "priority": 6},
        {"name": "Buffalo, New York", "lat": 42.8864, "lon": -78.8784, "tz": "America/New_York", "country": "United States", "priority": 6},
        {"name": "Cleveland, Ohio", "lat": 41.4993, "lon": -81.6944, "tz": "America/New_York", "country": "United States", "priority": 6},
        {"name": "Vilnius, Lithuania", "lat": 54.6872, "lon": 25.2797, "tz": "Europe/Vilnius", "country": "Lithuania", "priority": 5},
        {"name": "Gdansk, Poland", "lat": 54.3520, "lon": 18.6466, "tz": "Europe/Warsaw", "country": "Poland", "priority": 5},
        {"name": "Tartu, Estonia", "lat": 58.3781, "lon": 26.7290, "tz": "Europe/Tallinn", "country": "Estonia", "priority": 5},
        {"name": "Duluth, Minnesota", "lat": 46.7867, "lon": -92.1005, "tz": "America/Chicago", "country": "United States", "priority": 5},
        {"name": "Grand Rapids, Michigan", "lat": 42.9634, "lon": -85.6681, "tz": "America/Detroit", "country": "United States", "priority": 5},
        {"name": "Detroit, Michigan", "lat": 42.3314, "lon": -83.0458, "tz": "America/New_York", "country": "United States", "priority": 8},
        {"name": "Buffalo, New York", "lat": 42.8864, "lon": -78.8784, "tz": "America/New_York", "country": "United States", "priority": 7},
        {"name": "Milwaukee, Wisconsin", "lat": 43.0389, "lon": -87.9065, "tz": "America/Chicago", "country": "United States", "priority": 6},
        {"name": "Toronto, Canada", "lat": 43.6532, "lon": -79.3832, "tz": "America/Toronto", "country": "Canada", "priority": 5},
    ],
}


FALLBACK_LOCATIONS = {
    "sunny": [
        {"name": "Málaga, Spain", "lat": 36.7213, "lon": -4.4214, "tz": "Europe/Madrid", "country": "Spain", "priority": 5},
        {"name": "Alicante, Spain", "lat": 38.3452, "lon": -0.4810, "tz": "Europe/Madrid", "country": "Spain", "priority": 5},
        {"name": "Florence, Italy", "lat": 43.7696, "lon": 11.2558, "tz": "Europe/Rome", "country": "Italy", "priority": 5},
        {"name": "Palermo, Italy", "lat": 38.1157, "lon": 13.3613, "tz": "Europe/Rome", "country": "Italy", "priority": 5},
        {"name": "Santa Barbara, California", "lat": 34.4208, "lon": -119.6982, "tz": "America/Los_Angeles", "country": "United States", "priority": 5},
        {"name": "Monterey, California", "lat": 36.6002, "lon": -121.8947, "tz": "America/Los_Angeles", "country": "United States", "priority": 5},
        {"name": "San Luis Obispo, California", "lat": 35.2828, "lon": -120.6596, "tz": "America/Los_Angeles", "country": "United States", "priority": 5},
        {"name": "Tampa, Florida", "lat": 27.9506, "lon": -82.4572, "tz": "America/New_York", "country": "United States", "priority": 4},
        {"name": "Orlando, Florida", "lat": 28.5383, "lon": -81.3792, "tz": "America/New_York", "country": "United States", "priority": 4},
        {"name": "Tucson, Arizona", "lat": 32.2217, "lon": -110.9265, "tz": "America/Phoenix", "country": "United States", "priority": 4},
        {"name": "Perth, Australia", "lat": -31.9505, "lon": 115.8605, "tz": "Australia/Perth", "country": "Australia", "priority": 3},
        {"name": "Adelaide, Australia", "lat": -34.9285, "lon": 138.6007, "tz": "Australia/Adelaide", "country": "Australia", "priority": 3},
        {"name": "Marrakech, Morocco", "lat": 31.6295, "lon": -7.9811, "tz": "Africa/Casablanca", "country": "Morocco", "priority": 3},
        {"name": "Alice Springs, Australia", "lat": -23.6980, "lon": 133.8807, "tz": "Australia/Darwin", "country": "Australia", "priority": 4},
        {"name": "Broome, Australia", "lat": -17.9644, "lon": 122.2304, "tz": "Australia/Perth", "country": "Australia", "priority": 4},
        {"name": "Kalgoorlie, Australia", "lat": -30.7493, "lon": 121.4656, "tz": "Australia/Perth", "country": "Australia", "priority": 4},
        {"name": "Geraldton, Australia", "lat": -28.7774, "lon": 114.6230, "tz": "Australia/Perth", "country": "Australia", "priority": 4},
        {"name": "Townsville, Australia", "lat": -19.2590, "lon": 146.8169, "tz": "Australia/Brisbane", "country": "Australia", "priority": 4},
        {"name": "Cairns, Australia", "lat": -16.9186, "lon": 145.7781, "tz": "Australia/Brisbane", "country": "Australia", "priority": 4},
        {"name": "La Serena, Chile", "lat": -29.9027, "lon": -71.2519, "tz": "America/Santiago", "country": "Chile", "priority": 4},
        {"name": "Antofagasta, Chile", "lat": -23.6509, "lon": -70.3975, "tz": "America/Santiago", "country": "Chile", "priority": 4},
        {"name": "Iquique, Chile", "lat": -20.2208, "lon": -70.1431, "tz": "America/Santiago", "country": "Chile", "priority": 4},
        {"name": "Arica, Chile", "lat": -18.4783, "lon": -70.3126, "tz": "America/Santiago", "country": "Chile", "priority": 4},
        {"name": "Calama, Chile", "lat": -22.4667, "lon": -68.9333, "tz": "America/Santiago", "country": "Chile", "priority": 4},
        {"name": "Hurghada, Egypt", "lat": 27.2574, "lon": 33.8129, "tz": "Africa/Cairo", "country": "Egypt", "priority": 4},
        {"name": "Sharm el-Sheikh, Egypt", "lat": 27.9158, "lon": 34.3300, "tz": "Africa/Cairo", "country": "Egypt", "priority": 4},
        {"name": "Marsa Alam, Egypt", "lat": 25.0657, "lon": 34.8837, "tz": "Africa/Cairo", "country": "Egypt", "priority": 4},
        {"name": "Siwa Oasis, Egypt", "lat": 29.2030, "lon": 25.5197, "tz": "Africa/Cairo", "country": "Egypt", "priority": 4},
        {"name": "Ouarzazate, Morocco", "lat": 30.9335, "lon": -6.9370, "tz": "Africa/Casablanca", "country": "Morocco", "priority": 3},
        {"name": "Erfoud, Morocco", "lat": 31.4294, "lon": -4.2294, "tz": "Africa/Casablanca", "country": "Morocco", "priority": 3},
        {"name": "Zagora, Morocco", "lat": 30.3314, "lon": -5.8372, "tz": "Africa/Casablanca", "country": "Morocco", "priority": 3},
        {"name": "Tozeur, Tunisia", "lat": 33.9197, "lon": 8.1335, "tz": "Africa/Tunis", "country": "Tunisia", "priority": 3},
        {"name": "Douz, Tunisia", "lat": 33.4667, "lon": 9.0167, "tz": "Africa/Tunis", "country": "Tunisia", "priority": 3},
        {"name": "Ghardaïa, Algeria", "lat": 32.4911, "lon": 3.6736, "tz": "Africa/Algiers", "country": "Algeria", "priority": 3},
        {"name": "Tamanrasset, Algeria", "lat": 22.7851, "lon": 5.5228, "tz": "Africa/Algiers", "country": "Algeria", "priority": 3},
        {"name": "Eilat Mountains, Israel", "lat": 29.5019, "lon": 34.9633, "tz": "Asia/Jerusalem", "country": "Israel", "priority": 3},
        {"name": "Aqaba, Jordan", "lat": 29.5321, "lon": 35.0061, "tz": "Asia/Amman", "country": "Jordan", "priority": 3},
        {"name": "Wadi Rum, Jordan", "lat": 29.5833, "lon": 35.4167, "tz": "Asia/Amman", "country": "Jordan", "priority": 3},
        {"name": "Dahab, Egypt", "lat": 28.4942, "lon": 34.5136, "tz": "Africa/Cairo", "country": "Egypt", "priority": 3},
        {"name": "Bahariya Oasis, Egypt", "lat": 28.3489, "lon": 28.8642, "tz": "Africa/Cairo", "country": "Egypt", "priority": 3},
        {"name": "Farafra Oasis, Egypt", "lat": 27.0583, "lon": 27.9706, "tz": "Africa/Cairo", "country": "Egypt", "priority": 3},
        {"name": "Bend, Oregon", "lat": 44.0582, "lon": -121.3153, "tz": "America/Los_Angeles", "country": "United States", "priority": 2},
        {"name": "Redding, California", "lat": 40.5865, "lon": -122.3917, "tz": "America/Los_Angeles", "country": "United States", "priority": 2},
        {"name": "Bakersfield, California", "lat": 35.3733, "lon": -119.0187, "tz": "America/Los_Angeles", "country": "United States", "priority": 2},
        {"name": "Fresno, California", "lat": 36.7378, "lon": -119.7871, "tz": "America/Los_Angeles", "country": "United States", "priority": 2},
        {"name": "El Paso, Texas", "lat": 31.7619, "lon": -106.4850, "tz": "America/Denver", "country": "United States", "priority": 2},
        {"name": "Albuquerque, New Mexico", "lat": 35.0844, "lon": -106.6504, "tz": "America/Denver", "country": "United States", "priority": 2},
        {"name": "Santa Fe, New Mexico", "lat": 35.6870, "lon": -105.9378, "tz": "America/Denver", "country": "United States", "priority": 2},
        {"name": "Flagstaff, Arizona", "lat": 35.1983, "lon": -111.6513, "tz": "America/Phoenix", "country": "United States", "priority": 2},
    ],
    "rainy": [
        {"name": "Tacoma, Washington", "lat": 47.2529, "lon": -122.4443, "tz": "America/Los_Angeles", "country": "United States", "priority": 5},
        {"name": "Olympia, Washington", "lat": 47.0379, "lon": -122.9015, "tz": "America/Los_Angeles", "country": "United States", "priority": 5},
        {"name": "Eugene, Oregon", "lat": 44.0521, "lon": -123.0868, "tz": "America/Los_Angeles", "country": "United States", "priority": 5},
        {"name": "Inverness, Scotland", "lat": 57.4778, "lon": -4.2247, "tz": "Europe/London", "country": "United Kingdom", "priority": 5},
        {"name": "Limerick, Ireland", "lat": 52.6638, "lon": -8.6267, "tz": "Europe/Dublin", "country": "Ireland", "priority": 5},
        {"name": "Waterford, Ireland", "lat": 52.2593, "lon": -7.1101, "tz": "Europe/Dublin", "country": "Ireland", "priority": 5},
        {"name": "Gothenburg, Sweden", "lat": 57.7089, "lon": 11.9746, "tz": "Europe/Stockholm", "country": "Sweden", "priority": 4},
        {"name": "Trondheim, Norway", "lat": 63.4305, "lon": 10.3951, "tz": "Europe/Oslo", "country": "Norway", "priority": 4},
        {"name": "Stavanger, Norway", "lat": 58.9700, "lon": 5.7331, "tz": "Europe/Oslo", "country": "Norway", "priority": 4},
        {"name": "Gdansk, Poland", "lat": 54.3520, "lon": 18.6466, "tz": "Europe/Warsaw", "country": "Poland", "priority": 3},
        {"name": "Kuala Lumpur, Malaysia", "lat": 3.1390, "lon": 101.6869, "tz": "Asia/Kuala_Lumpur", "country": "Malaysia", "priority": 3},
        {"name": "Singapore", "lat": 1.3521, "lon": 103.8198, "tz": "Asia/Singapore", "country": "Singapore", "priority": 3},
        {"name": "Mount Waialeale, Hawaii", "lat": 22.0751, "lon": -159.4984, "tz": "Pacific/Honolulu", "country": "United States", "priority": 4},
        {"name": "Tutendo, Colombia", "lat": 5.6964, "lon": -76.5322, "tz": "America/Bogota", "country": "Colombia", "priority": 4},
        {"name": "Lloró, Colombia", "lat": 5.5000, "lon": -76.5333, "tz": "America/Bogota", "country": "Colombia", "priority": 4},
        {"name": "Buenaventura, Colombia", "lat": 3.8801, "lon": -77.0313, "tz": "America/Bogota", "country": "Colombia", "priority": 4},
        {"name": "Quibdó, Colombia", "lat": 5.6945, "lon": -76.6581, "tz": "America/Bogota", "country": "Colombia", "priority": 4},
        {"name": "Puerto López, Colombia", "lat": 4.0833, "lon": -73.4667, "tz": "America/Bogota", "country": "Colombia", "priority": 4},
        {"name": "Debundscha, Cameroon", "lat": 4.1547, "lon": 9.0081, "tz": "Africa/Douala", "country": "Cameroon", "priority": 4},
        {"name": "Big Bog, Hawaii", "lat": 20.8047, "lon": -156.2639, "tz": "Pacific/Honolulu", "country": "United States", "priority": 4},
        {"name": "Crkvice, Montenegro", "lat": 42.6667, "lon": 18.6167, "tz": "Europe/Podgorica", "country": "Montenegro", "priority": 4},
        {"name": "Milford Sound, New Zealand", "lat": -44.6667, "lon": 167.9167, "tz": "Pacific/Auckland", "country": "New Zealand", "priority": 4},
        {"name": "Franz Josef, New Zealand", "lat": -43.3869, "lon": 170.1881, "tz": "Pacific/Auckland", "country": "New Zealand", "priority": 4},
        {"name": "Greymouth, New Zealand", "lat": -42.4500, "lon": 171.2167, "tz": "Pacific/Auckland", "country": "New Zealand", "priority": 4},
        {"name": "Hokitika, New Zealand", "lat": -42.7167, "lon": 170.9667, "tz": "Pacific/Auckland", "country": "New Zealand", "priority": 3},
        {"name": "Tofino, Canada", "lat": 49.1533, "lon": -125.9069, "tz": "America/Vancouver", "country": "Canada", "priority": 3},
        {"name": "Prince Rupert, Canada", "lat": 54.3150, "lon": -130.3209, "tz": "America/Vancouver", "country": "Canada", "priority": 3},
        {"name": "Ketchikan, Alaska", "lat": 55.3422, "lon": -131.6461, "tz": "America/Metlakatla", "country": "United States", "priority": 3},
        {"name": "Juneau, Alaska", "lat": 58.3019, "lon": -134.4197, "tz": "America/Juneau", "country": "United States", "priority": 3},
        {"name": "Sitka, Alaska", "lat": 57.0531, "lon": -135.3300, "tz": "America/Sitka", "country": "United States", "priority": 3},
        {"name": "Yakutat, Alaska", "lat": 59.5467, "lon": -139.7271, "tz": "America/Yakutat", "country": "United States", "priority": 3},
        {"name": "Valdez, Alaska", "lat": 61.1308, "lon": -146.3483, "tz": "America/Anchorage", "country": "United States", "priority": 3},
        {"name": "Seward, Alaska", "lat": 60.1042, "lon": -149.4422, "tz": "America/Anchorage", "country": "United States", "priority": 3},
        {"name": "Haines, Alaska", "lat": 59.2358, "lon": -135.4419, "tz": "America/Juneau", "country": "United States", "priority": 3},
        {"name": "Petersburg, Alaska", "lat": 56.8125, "lon": -132.9453, "tz": "America/Sitka", "country": "United States", "priority": 3},
        {"name": "Wrangell, Alaska", "lat": 56.4708, "lon": -132.3769, "tz": "America/Sitka", "country": "United States", "priority": 3},
        {"name": "Cordova, Alaska", "lat": 60.5422, "lon": -145.7581, "tz": "America/Anchorage", "country": "United States", "priority": 3},
        {"name": "Whittier, Alaska", "lat": 60.7744, "lon": -148.6850, "tz": "America/Anchorage", "country": "United States", "priority": 3},
        {"name": "Grytviken, South Georgia", "lat": -54.2814, "lon": -36.5089, "tz": "Atlantic/South_Georgia", "country": "South Georgia", "priority": 2},
        {"name": "Ushuaia, Argentina", "lat": -54.8019, "lon": -68.3030, "tz": "America/Argentina/Ushuaia", "country": "Argentina", "priority": 2},
        {"name": "Punta Arenas, Chile", "lat": -53.1638, "lon": -70.9171, "tz": "America/Punta_Arenas", "country": "Chile", "priority": 2},
        {"name": "Puerto Williams, Chile", "lat": -54.9333, "lon": -67.6167, "tz": "America/Punta_Arenas", "country": "Chile", "priority": 2},
        {"name": "King Edward Point, South Georgia", "lat": -54.2833, "lon": -36.5000, "tz": "Atlantic/South_Georgia", "country": "South Georgia", "priority": 2},
    ],
    "stormy": [
        {"name": "Lerwick, Shetland", "lat": 60.1547, "lon": -1.1494, "tz": "Europe/London", "country": "United Kingdom", "priority": 5},
        {"name": "Stornoway, Scotland", "lat": 58.2090, "lon": -6.3890, "tz": "Europe/London", "country": "United Kingdom", "priority": 5},
        {"name": "Kirkwall, Orkney", "lat": 58.9814, "lon": -2.9597, "tz": "Europe/London", "country": "United Kingdom", "priority": 5},
        {"name": "Esbjerg, Denmark", "lat": 55.4761, "lon": 8.4560, "tz": "Europe/Copenhagen", "country": "Denmark", "priority": 4},
        {"name": "Groningen, Netherlands", "lat": 53.2194, "lon": 6.5665, "tz": "Europe/Amsterdam", "country": "Netherlands", "priority": 4},
        {"name": "Lübeck, Germany", "lat": 53.8655, "lon": 10.6866, "tz": "Europe/Berlin", "country": "Germany", "priority": 4},
        {"name": "Oklahoma City, Oklahoma", "lat": 35.4676, "lon": -97.5164, "tz": "America/Chicago", "country": "United States", "priority": 4},
        {"name": "Kansas City, Missouri", "lat": 39.0997, "lon": -94.5786, "tz": "America/Chicago", "country": "United States", "priority": 4},
        {"name": "Milwaukee, Wisconsin", "lat": 43.0389, "lon": -87.9065, "tz": "America/Chicago", "country": "United States", "priority": 4},
        {"name": "Sydney, Nova Scotia", "lat": 46.1368, "lon": -60.1942, "tz": "America/Halifax", "country": "Canada", "priority": 3},
        {"name": "Charlottetown, PEI", "lat": 46.2382, "lon": -63.1311, "tz": "America/Halifax", "country": "Canada", "priority": 3},
        {"name": "Lightning Ridge, Australia", "lat": -29.4239, "lon": 147.9783, "tz": "Australia/Sydney", "country": "Australia", "priority": 4},
        {"name": "Katherine, Australia", "lat": -14.4656, "lon": 132.2623, "tz": "Australia/Darwin", "country": "Australia", "priority": 4},
        {"name": "Tennant Creek, Australia", "lat": -19.6544, "lon": 134.1894, "tz": "Australia/Darwin", "country": "Australia", "priority": 4},
        {"name": "Cairns, Australia", "lat": -16.9186, "lon": 145.7781, "tz": "Australia/Brisbane", "country": "Australia", "priority": 4},
        {"name": "Broome, Australia", "lat": -17.9644, "lon": 122.2304, "tz": "Australia/Perth", "country": "Australia", "priority": 4},
        {"name": "Port Hedland, Australia", "lat": -20.3086, "lon": 118.6219, "tz": "Australia/Perth", "country": "Australia", "priority": 4},
        {"name": "Catatumbo River, Venezuela", "lat": 9.0000, "lon": -71.0000, "tz": "America/Caracas", "country": "Venezuela", "priority": 4},
        {"name": "Zulia, Venezuela", "lat": 10.0000, "lon": -72.0000, "tz": "America/Caracas", "country": "Venezuela", "priority": 4},
        {"name": "Bogor, Indonesia", "lat": -6.5950, "lon": 106.7160, "tz": "Asia/Jakarta", "country": "Indonesia", "priority": 4},
        {"name": "Ciwidey, Indonesia", "lat": -7.1431, "lon": 107.4694, "tz": "Asia/Jakarta", "country": "Indonesia", "priority": 4},
        {"name": "Tororo, Uganda", "lat": 0.6928, "lon": 34.1806, "tz": "Africa/Kampala", "country": "Uganda", "priority": 4},
        {"name": "Gulu, Uganda", "lat": 2.7796, "lon": 32.2993, "tz": "Africa/Kampala", "country": "Uganda", "priority": 4},
        {"name": "Gitega, Burundi", "lat": -3.4264, "lon": 29.9306, "tz": "Africa/Bujumbura", "country": "Burundi", "priority": 3},
        {"name": "Bukavu, Democratic Republic of Congo", "lat": -2.5067, "lon": 28.8489, "tz": "Africa/Lubumbashi", "country": "Democratic Republic of Congo", "priority": 3},
        {"name": "Goma, Democratic Republic of Congo", "lat": -1.6792, "lon": 29.2280, "tz": "Africa/Lubumbashi", "country": "Democratic Republic of Congo", "priority": 3},
        {"name": "Kigali, Rwanda", "lat": -1.9441, "lon": 30.0619, "tz": "Africa/Kigali", "country": "Rwanda", "priority": 3},
        {"name": "Mombasa, Kenya", "lat": -4.0435, "lon": 39.6682, "tz": "Africa/Nairobi", "country": "Kenya", "priority": 3},
        {"name": "Nairobi, Kenya", "lat": -1.2921, "lon": 36.8219, "tz": "Africa/Nairobi", "country": "Kenya", "priority": 3},
        {"name": "Dar es Salaam, Tanzania", "lat": -6.7924, "lon": 39.2083, "tz": "Africa/Dar_es_Salaam", "country": "Tanzania", "priority": 3},
        {"name": "Mwanza, Tanzania", "lat": -2.5164, "lon": 32.9175, "tz": "Africa/Dar_es_Salaam", "country": "Tanzania", "priority": 3},
        {"name": "Entebbe, Uganda", "lat": 0.0647, "lon": 32.4432, "tz": "Africa/Kampala", "country": "Uganda", "priority": 3},
        {"name": "Kisumu, Kenya", "lat": -0.0917, "lon": 34.7680, "tz": "Africa/Nairobi", "country": "Kenya", "priority": 3},
        {"name": "Akureyri, Iceland", "lat": 65.6835, "lon": -18.1262, "tz": "Atlantic/Reykjavik", "country": "Iceland", "priority": 3},
        {"name": "Westman Islands, Iceland", "lat": 63.4500, "lon": -20.2833, "tz": "Atlantic/Reykjavik", "country": "Iceland", "priority": 3},
        {"name": "Jan Mayen, Norway", "lat": 70.9667, "lon": -8.6667, "tz": "Europe/Oslo", "country": "Norway", "priority": 2},
        {"name": "Bear Island, Norway", "lat": 74.5000, "lon": 19.0000, "tz": "Europe/Oslo", "country": "Norway", "priority": 2},
        {"name": "South Georgia Island", "lat": -54.2814, "lon": -36.5089, "tz": "Atlantic/South_Georgia", "country": "South Georgia", "priority": 2},
        {"name": "Macquarie Island, Australia", "lat": -54.6200, "lon": 158.8600, "tz": "Antarctica/Macquarie", "country": "Australia", "priority": 2},
        {"name": "Kerguelen Islands, France", "lat": -49.3500, "lon": 69.2167, "tz": "Indian/Kerguelen", "country": "France", "priority": 2},
        {"name": "Heard Island, Australia", "lat": -53.1000, "lon": 73.5167, "tz": "Indian/Kerguelen", "country": "Australia", "priority": 2},
    ],
    "snowy": [
        {"name": "Fairbanks, Alaska", "lat": 64.8378, "lon": -147.7164, "tz": "America/Anchorage", "country": "United States", "priority": 10},
        {"name": "Yellowknife, Canada", "lat": 62.4540, "lon": -114.3718, "tz": "America/Yellowknife", "country": "Canada", "priority": 10},
        {"name": "Murmansk, Russia", "lat": 68.9585, "lon": 33.0827, "tz": "Europe/Moscow", "country": "Russia", "priority": 10},
        {"name": "Rovaniemi, Finland", "lat": 66.5039, "lon": 25.7294, "tz": "Europe/Helsinki", "country": "Finland", "priority": 10},
        {"name": "McMurdo Station, Antarctica", "lat": -77.8419, "lon": 166.6863, "tz": "Antarctica/McMurdo", "country": "Antarctica", "priority": 10},
        {"name": "Ushuaia, Argentina", "lat": -54.8019, "lon": -68.3030, "tz": "America/Argentina/Ushuaia", "country": "Argentina", "priority": 9},
        {"name": "Queenstown, New Zealand", "lat": -45.0312, "lon": 168.6626, "tz": "Pacific/Auckland", "country": "New Zealand", "priority": 8},
        {"name": "Mount Washington, New Hampshire", "lat": 44.2706, "lon": -71.3033, "tz": "America/New_York", "country": "United States", "priority": 9},
        {"name": "Denali, Alaska", "lat": 63.0692, "lon": -151.0070, "tz": "America/Anchorage", "country": "United States", "priority": 9},
        {"name": "Mount Rainier, Washington", "lat": 46.8523, "lon": -121.7603, "tz": "America/Los_Angeles", "country": "United States", "priority": 8},
        {"name": "Yakutsk, Russia", "lat": 62.0355, "lon": 129.6755, "tz": "Asia/Yakutsk", "country": "Russia", "priority": 9},
        {"name": "Norilsk, Russia", "lat": 69.3558, "lon": 88.1893, "tz": "Asia/Krasnoyarsk", "country": "Russia", "priority": 9},
        {"name": "Iqaluit, Nunavut", "lat": 63.7467, "lon": -68.5170, "tz": "America/Iqaluit", "country": "Canada", "priority": 8},
        {"name": "Churchill, Manitoba", "lat": 58.7684, "lon": -94.1647, "tz": "America/Winnipeg", "country": "Canada", "priority": 8},
        {"name": "Jasper, Canada", "lat": 52.8737, "lon": -118.0814, "tz": "America/Edmonton", "country": "Canada", "priority": 5},
        {"name": "Lake Louise, Canada", "lat": 51.4254, "lon": -116.1773, "tz": "America/Edmonton", "country": "Canada", "priority": 5},
        {"name": "Canmore, Canada", "lat": 51.0918, "lon": -115.3456, "tz": "America/Edmonton", "country": "Canada", "priority": 5},
        {"name": "Steamboat Springs, Colorado", "lat": 40.4850, "lon": -106.8317, "tz": "America/Denver", "country": "United States", "priority": 5},
        {"name": "Telluride, Colorado", "lat": 37.9375, "lon": -107.8123, "tz": "America/Denver", "country": "United States", "priority": 5},
        {"name": "Big Sky, Montana", "lat": 45.2845, "lon": -111.3015, "tz": "America/Denver", "country": "United States", "priority": 4},
        {"name": "Interlaken, Switzerland", "lat": 46.6863, "lon": 7.8632, "tz": "Europe/Zurich", "country": "Switzerland", "priority": 4},
        {"name": "Grindelwald, Switzerland", "lat": 46.6244, "lon": 8.0381, "tz": "Europe/Zurich", "country": "Switzerland", "priority": 4},
        {"name": "Meribel, France", "lat": 45.4006, "lon": 6.5669, "tz": "Europe/Paris", "country": "France", "priority": 4},
        {"name": "Luleå, Sweden", "lat": 65.5848, "lon": 22.1547, "tz": "Europe/Stockholm", "country": "Sweden", "priority": 3},
        {"name": "Oulu, Finland", "lat": 65.0121, "lon": 25.4651, "tz": "Europe/Helsinki", "country": "Finland", "priority": 3},
        {"name": "Ny-Ålesund, Svalbard", "lat": 78.9259, "lon": 11.9300, "tz": "Arctic/Longyearbyen", "country": "Norway", "priority": 4},
        {"name": "Barentsburg, Svalbard", "lat": 78.0648, "lon": 14.2335, "tz": "Arctic/Longyearbyen", "country": "Norway", "priority": 4},
        {"name": "Eureka, Nunavut", "lat": 79.9833, "lon": -85.9333, "tz": "America/Toronto", "country": "Canada", "priority": 4},
        {"name": "Ellesmere Island, Nunavut", "lat": 81.0000, "lon": -82.0000, "tz": "America/Toronto", "country": "Canada", "priority": 4},
        {"name": "Tuktoyaktuk, Northwest Territories", "lat": 69.4541, "lon": -133.0374, "tz": "America/Inuvik", "country": "Canada", "priority": 4},
        {"name": "Cambridge Bay, Nunavut", "lat": 69.1181, "lon": -105.0581, "tz": "America/Cambridge_Bay", "country": "Canada", "priority": 4},
        {"name": "Rankin Inlet, Nunavut", "lat": 62.8097, "lon": -92.0890, "tz": "America/Rankin_Inlet", "country": "Canada", "priority": 4},
        {"name": "Baker Lake, Nunavut", "lat": 64.3190, "lon": -96.0768, "tz": "America/Rankin_Inlet", "country": "Canada", "priority": 4},
        {"name": "Pangnirtung, Nunavut", "lat": 66.1451, "lon": -65.7125, "tz": "America/Iqaluit", "country": "Canada", "priority": 4},
        {"name": "Clyde River, Nunavut", "lat": 70.4692, "lon": -68.5914, "tz": "America/Iqaluit", "country": "Canada", "priority": 3},
        {"name": "Arctic Bay, Nunavut", "lat": 73.0333, "lon": -85.1500, "tz": "America/Toronto", "country": "Canada", "priority": 3},
        {"name": "Igloolik, Nunavut", "lat": 69.3747, "lon": -81.7967, "tz": "America/Iqaluit", "country": "Canada", "priority": 3},
        {"name": "Hall Beach, Nunavut", "lat": 68.7761, "lon": -81.2436, "tz": "America/Iqaluit", "country": "Canada", "priority": 3},
        {"name": "Kugluktuk, Nunavut", "lat": 67.8282, "lon": -115.0975, "tz": "America/Cambridge_Bay", "country": "Canada", "priority": 3},
        {"name": "Gjøa Haven, Nunavut", "lat": 68.6364, "lon": -95.8794, "tz": "America/Cambridge_Bay", "country": "Canada", "priority": 3},
        {"name": "Taloyoak, Nunavut", "lat": 69.5378, "lon": -93.5267, "tz": "America/Cambridge_Bay", "country": "Canada", "priority": 3},
        {"name": "Kugaaruk, Nunavut", "lat": 68.5347, "lon": -89.8081, "tz": "America/Cambridge_Bay", "country": "Canada", "priority": 3},
        {"name": "Qaanaaq, Greenland", "lat": 77.4840, "lon": -69.3632, "tz": "America/Thule", "country": "Greenland", "priority": 3},
        {"name": "Ittoqqortoormiit, Greenland", "lat": 70.4864, "lon": -21.9694, "tz": "America/Scoresbysund", "country": "Greenland", "priority": 3},
        {"name": "Kangerlussuaq, Greenland", "lat": 67.0126, "lon": -50.6882, "tz": "America/Nuuk", "country": "Greenland", "priority": 3},
        {"name": "Nuuk, Greenland", "lat": 64.1836, "lon": -51.7214, "tz": "America/Nuuk", "country": "Greenland", "priority": 3},
        {"name": "Tasiilaq, Greenland", "lat": 65.6145, "lon": -37.6368, "tz": "America/Scoresbysund", "country": "Greenland", "priority": 3},
        {"name": "Ilulissat, Greenland", "lat": 69.2197, "lon": -51.0986, "tz": "America/Nuuk", "country": "Greenland", "priority": 3},
        {"name": "Upernavik, Greenland", "lat": 72.7864, "lon": -56.1549, "tz": "America/Nuuk", "country": "Greenland", "priority": 3},
        {"name": "Vorkuta, Russia", "lat": 67.4981, "lon": 64.0522, "tz": "Europe/Moscow", "country": "Russia", "priority": 2},
        {"name": "Salekhard, Russia", "lat": 66.5297, "lon": 66.6014, "tz": "Asia/Yekaterinburg", "country": "Russia", "priority": 2},
        {"name": "Norilsk, Russia", "lat": 69.3558, "lon": 88.1893, "tz": "Asia/Krasnoyarsk", "country": "Russia", "priority": 2},
        {"name": "Tiksi, Russia", "lat": 71.6872, "lon": 128.8697, "tz": "Asia/Yakutsk", "country": "Russia", "priority": 2},
        {"name": "Chukotka, Russia", "lat": 66.0000, "lon": 170.0000, "tz": "Asia/Anadyr", "country": "Russia", "priority": 2},
        {"name": "Pevek, Russia", "lat": 69.7008, "lon": 170.3133, "tz": "Asia/Anadyr", "country": "Russia", "priority": 2},
        {"name": "Anadyr, Russia", "lat": 64.7353, "lon": 177.5169, "tz": "Asia/Anadyr", "country": "Russia", "priority": 2},
    ],
    "breezy": [
        {"name": "Galveston, Texas", "lat": 29.3013, "lon": -94.7977, "tz": "America/Chicago", "country": "United States", "priority": 5},
        {"name": "Virginia Beach, Virginia", "lat": 36.8529, "lon": -75.9780, "tz": "America/New_York", "country": "United States", "priority": 5},
        {"name": "Myrtle Beach, South Carolina", "lat": 33.6891, "lon": -78.8867, "tz": "America/New_York", "country": "United States", "priority": 4},
        {"name": "Outer Banks, North Carolina", "lat": 35.5582, "lon": -75.4665, "tz": "America/New_York", "country": "United States", "priority": 4},
        {"name": "Santorini, Greece", "lat": 36.3932, "lon": 25.4615, "tz": "Europe/Athens", "country": "Greece", "priority": 4},
        {"name": "Mykonos, Greece", "lat": 37.4467, "lon": 25.3289, "tz": "Europe/Athens", "country": "Greece", "priority": 4},
        {"name": "Ushuaia, Argentina", "lat": -54.8000, "lon": -68.3000, "tz": "America/Argentina/Ushuaia", "country": "Argentina", "priority": 4},
        {"name": "Punta Arenas, Chile", "lat": -53.1638, "lon": -70.9171, "tz": "America/Punta_Arenas", "country": "Chile", "priority": 4},
        {"name": "Stanley, Falkland Islands", "lat": -51.6970, "lon": -57.8570, "tz": "Atlantic/Stanley", "country": "Falkland Islands", "priority": 4},
        {"name": "Tristan da Cunha", "lat": -37.0681, "lon": -12.2784, "tz": "Atlantic/St_Helena", "country": "United Kingdom", "priority": 4},
        {"name": "St. Helena Island", "lat": -15.9650, "lon": -5.7089, "tz": "Atlantic/St_Helena", "country": "United Kingdom", "priority": 4},
        {"name": "Ascension Island", "lat": -7.9467, "lon": -14.3559, "tz": "Atlantic/St_Helena", "country": "United Kingdom", "priority": 4},
        {"name": "Azores, Portugal", "lat": 37.7412, "lon": -25.6756, "tz": "Atlantic/Azores", "country": "Portugal", "priority": 4},
        {"name": "Madeira, Portugal", "lat": 32.7607, "lon": -16.9595, "tz": "Atlantic/Madeira", "country": "Portugal", "priority": 4},
        {"name": "Canary Islands, Spain", "lat": 28.2916, "lon": -16.6291, "tz": "Atlantic/Canary", "country": "Spain", "priority": 4},
        {"name": "Cape Verde Islands", "lat": 16.5388, "lon": -24.0132, "tz": "Atlantic/Cape_Verde", "country": "Cape Verde", "priority": 3},
        {"name": "Bermuda", "lat": 32.3078, "lon": -64.7505, "tz": "Atlantic/Bermuda", "country": "Bermuda", "priority": 3},
        {"name": "Barbados", "lat": 13.1939, "lon": -59.5432, "tz": "America/Barbados", "country": "Barbados", "priority": 3},
        {"name": "Martinique, France", "lat": 14.6415, "lon": -61.0242, "tz": "America/Martinique", "country": "France", "priority": 3},
        {"name": "Guadeloupe, France", "lat": 16.2650, "lon": -61.5510, "tz": "America/Guadeloupe", "country": "France", "priority": 3},
        {"name": "Aruba", "lat": 12.5211, "lon": -69.9683, "tz": "America/Aruba", "country": "Aruba", "priority": 3},
        {"name": "Curaçao", "lat": 12.1696, "lon": -68.9900, "tz": "America/Curacao", "country": "Curaçao", "priority": 3},
        {"name": "Hawaiian Trade Winds, Hawaii", "lat": 20.0000, "lon": -156.0000, "tz": "Pacific/Honolulu", "country": "United States", "priority": 2},
        {"name": "Maui, Hawaii", "lat": 20.7984, "lon": -156.3319, "tz": "Pacific/Honolulu", "country": "United States", "priority": 2},
        {"name": "Kauai, Hawaii", "lat": 22.0964, "lon": -159.5261, "tz": "Pacific/Honolulu", "country": "United States", "priority": 2},
        {"name": "Big Island, Hawaii", "lat": 19.8968, "lon": -155.5828, "tz": "Pacific/Honolulu", "country": "United States", "priority": 2},
        {"name": "Fiji Islands", "lat": -17.7134, "lon": 178.0650, "tz": "Pacific/Fiji", "country": "Fiji", "priority": 2},
        {"name": "Vanuatu", "lat": -15.3767, "lon": 166.9592, "tz": "Pacific/Efate", "country": "Vanuatu", "priority": 2},
        {"name": "New Caledonia, France", "lat": -20.9043, "lon": 165.6180, "tz": "Pacific/Noumea", "country": "France", "priority": 2},
        {"name": "Lord Howe Island, Australia", "lat": -31.5554, "lon": 159.0804, "tz": "Australia/Lord_Howe", "country": "Australia", "priority": 2},
        {"name": "Norfolk Island, Australia", "lat": -29.0408, "lon": 167.9547, "tz": "Pacific/Norfolk", "country": "Australia", "priority": 2},
    ],
    "misty": [
        {"name": "Eureka, California", "lat": 40.8021, "lon": -124.1637, "tz": "America/Los_Angeles", "country": "United States", "priority": 5},
        {"name": "Crescent City, California", "lat": 41.7558, "lon": -124.2026, "tz": "America/Los_Angeles", "country": "United States", "priority": 5},
        {"name": "Astoria, Oregon", "lat": 46.1879, "lon": -123.8313, "tz": "America/Los_Angeles", "country": "United States", "priority": 5},
        {"name": "Bar Harbor, Maine", "lat": 44.3876, "lon": -68.2039, "tz": "America/New_York", "country": "United States", "priority": 4},
        {"name": "Digby, Nova Scotia", "lat": 44.6215, "lon": -65.7580, "tz": "America/Halifax", "country": "Canada", "priority": 4},
        {"name": "Great Dividing Range, Australia", "lat": -37.0000, "lon": 146.0000, "tz": "Australia/Melbourne", "country": "Australia", "priority": 4},
        {"name": "Blue Mountains, Australia", "lat": -33.7000, "lon": 150.3000, "tz": "Australia/Sydney", "country": "Australia", "priority": 4},
        {"name": "Grampians, Australia", "lat": -37.2500, "lon": 142.5000, "tz": "Australia/Melbourne", "country": "Australia", "priority": 4},
        {"name": "Snowy Mountains, Australia", "lat": -36.4000, "lon": 148.3000, "tz": "Australia/Sydney", "country": "Australia", "priority": 4},
        {"name": "Daintree Rainforest, Australia", "lat": -16.1700, "lon": 145.4000, "tz": "Australia/Brisbane", "country": "Australia", "priority": 4},
        {"name": "Lamington National Park, Australia", "lat": -28.2000, "lon": 153.1000, "tz": "Australia/Brisbane", "country": "Australia", "priority": 4},
        {"name": "Monteverde Cloud Forest, Costa Rica", "lat": 10.3000, "lon": -84.8000, "tz": "America/Costa_Rica", "country": "Costa Rica", "priority": 3},
        {"name": "Chirripó National Park, Costa Rica", "lat": 9.4800, "lon": -83.4900, "tz": "America/Costa_Rica", "country": "Costa Rica", "priority": 3},
        {"name": "Colombian Coffee Region", "lat": 4.8000, "lon": -75.7000, "tz": "America/Bogota", "country": "Colombia", "priority": 3},
        {"name": "Cocora Valley, Colombia", "lat": 4.6400, "lon": -75.4700, "tz": "America/Bogota", "country": "Colombia", "priority": 3},
        {"name": "Andean Highlands, Ecuador", "lat": -1.0000, "lon": -78.5000, "tz": "America/Guayaquil", "country": "Ecuador", "priority": 3},
        {"name": "Mindo Cloud Forest, Ecuador", "lat": -0.0500, "lon": -78.7700, "tz": "America/Guayaquil", "country": "Ecuador", "priority": 3},
        {"name": "Manu National Park, Peru", "lat": -12.0000, "lon": -71.5000, "tz": "America/Lima", "country": "Peru", "priority": 3},
        {"name": "Sacred Valley, Peru", "lat": -13.3000, "lon": -72.0000, "tz": "America/Lima", "country": "Peru", "priority": 3},
        {"name": "Atlantic Forest, Brazil", "lat": -22.0000, "lon": -42.0000, "tz": "America/Sao_Paulo", "country": "Brazil", "priority": 3},
        {"name": "Serra da Mantiqueira, Brazil", "lat": -22.4000, "lon": -45.0000, "tz": "America/Sao_Paulo", "country": "Brazil", "priority": 3},
        {"name": "Cameron Highlands, Malaysia", "lat": 4.4700, "lon": 101.3800, "tz": "Asia/Kuala_Lumpur", "country": "Malaysia", "priority": 2},
        {"name": "Fraser's Hill, Malaysia", "lat": 3.7200, "lon": 101.7400, "tz": "Asia/Kuala_Lumpur", "country": "Malaysia", "priority": 2},
        {"name": "Mount Kinabalu, Malaysia", "lat": 6.0800, "lon": 116.5600, "tz": "Asia/Kuching", "country": "Malaysia", "priority": 2},
        {"name": "Bandung Highlands, Indonesia", "lat": -6.9000, "lon": 107.6000, "tz": "Asia/Jakarta", "country": "Indonesia", "priority": 2},
        {"name": "Bromo Tengger, Indonesia", "lat": -7.9400, "lon": 112.9500, "tz": "Asia/Jakarta", "country": "Indonesia", "priority": 2},
        {"name": "Bali Highlands, Indonesia", "lat": -8.2000, "lon": 115.1900, "tz": "Asia/Makassar", "country": "Indonesia", "priority": 2},
        {"name": "Lembang, Indonesia", "lat": -6.8100, "lon": 107.6200, "tz": "Asia/Jakarta", "country": "Indonesia", "priority": 2},
        {"name": "Tea Country, Sri Lanka", "lat": 6.9700, "lon": 80.7800, "tz": "Asia/Colombo", "country": "Sri Lanka", "priority": 2},
        {"name": "Kandy Hills, Sri Lanka", "lat": 7.2900, "lon": 80.6300, "tz": "Asia/Colombo", "country": "Sri Lanka", "priority": 2},
        {"name": "Horton Plains, Sri Lanka", "lat": 6.8000, "lon": 80.8000, "tz": "Asia/Colombo", "country": "Sri Lanka", "priority": 2},
    ],
    "foggy": [
        {"name": "Half Moon Bay, California", "lat": 37.4636, "lon": -122.4286, "tz": "America/Los_Angeles", "country": "United States", "priority": 5},
        {"name": "Pacifica, California", "lat": 37.6138, "lon": -122.4869, "tz": "America/Los_Angeles", "country": "United States", "priority": 5},
        {"name": "Point Reyes, California", "lat": 38.0733, "lon": -122.9494, "tz": "America/Los_Angeles", "country": "United States", "priority": 5},
        {"name": "Tenerife, Spain", "lat": 28.2916, "lon": -16.6291, "tz": "Atlantic/Canary", "country": "Spain", "priority": 4},
        {"name": "Valparaíso, Chile", "lat": -33.0458, "lon": -71.6197, "tz": "America/Santiago", "country": "Chile", "priority": 3},
        {"name": "Central Valley, California", "lat": 37.5000, "lon": -121.0000, "tz": "America/Los_Angeles", "country": "United States", "priority": 4},
        {"name": "Modesto, California", "lat": 37.6391, "lon": -120.9969, "tz": "America/Los_Angeles", "country": "United States", "priority": 4},
        {"name": "Stockton, California", "lat": 37.9577, "lon": -121.2908, "tz": "America/Los_Angeles", "country": "United States", "priority": 4},
        {"name": "Fresno, California", "lat": 36.7378, "lon": -119.7871, "tz": "America/Los_Angeles", "country": "United States", "priority": 4},
        {"name": "Merced, California", "lat": 37.3022, "lon": -120.4829, "tz": "America/Los_Angeles", "country": "United States", "priority": 4},
        {"name": "Bakersfield, California", "lat": 35.3733, "lon": -119.0187, "tz": "America/Los_Angeles", "country": "United States", "priority": 4},
        {"name": "Portsmouth, England", "lat": 50.8198, "lon": -1.0880, "tz": "Europe/London", "country": "United Kingdom", "priority": 4},
        {"name": "Plymouth, England", "lat": 50.3755, "lon": -4.1427, "tz": "Europe/London", "country": "United Kingdom", "priority": 4},
        {"name": "Brighton, England", "lat": 50.8225, "lon": -0.1372, "tz": "Europe/London", "country": "United Kingdom", "priority": 4},
        {"name": "Dover, England", "lat": 51.1279, "lon": 1.3134, "tz": "Europe/London", "country": "United Kingdom", "priority": 4},
        {"name": "Aberdeen, Scotland", "lat": 57.1497, "lon": -2.0943, "tz": "Europe/London", "country": "United Kingdom", "priority": 4},
        {"name": "Inverness, Scotland", "lat": 57.4778, "lon": -4.2247, "tz": "Europe/London", "country": "United Kingdom", "priority": 4},
        {"name": "Cork, Ireland", "lat": 51.8985, "lon": -8.4756, "tz": "Europe/Dublin", "country": "Ireland", "priority": 4},
        {"name": "Galway, Ireland", "lat": 53.2707, "lon": -9.0568, "tz": "Europe/Dublin", "country": "Ireland", "priority": 4},
        {"name": "Limerick, Ireland", "lat": 52.6638, "lon": -8.6267, "tz": "Europe/Dublin", "country": "Ireland", "priority": 4},
        {"name": "Waterford, Ireland", "lat": 52.2593, "lon": -7.1101, "tz": "Europe/Dublin", "country": "Ireland", "priority": 4},
        {"name": "Valparaíso, Chile", "lat": -33.0472, "lon": -71.6127, "tz": "America/Santiago", "country": "Chile", "priority": 3},
        {"name": "Viña del Mar, Chile", "lat": -33.0153, "lon": -71.5500, "tz": "America/Santiago", "country": "Chile", "priority": 3},
        {"name": "Concepción, Chile", "lat": -36.8201, "lon": -73.0444, "tz": "America/Santiago", "country": "Chile", "priority": 3},
        {"name": "Puerto Montt, Chile", "lat": -41.4693, "lon": -72.9424, "tz": "America/Santiago", "country": "Chile", "priority": 3},
        {"name": "Punta Arenas, Chile", "lat": -53.1638, "lon": -70.9171, "tz": "America/Punta_Arenas", "country": "Chile", "priority": 3},
        {"name": "Cape Town, South Africa", "lat": -33.9249, "lon": 18.4241, "tz": "Africa/Johannesburg", "country": "South Africa", "priority": 3},
        {"name": "Port Elizabeth, South Africa", "lat": -33.9608, "lon": 25.6022, "tz": "Africa/Johannesburg", "country": "South Africa", "priority": 3},
        {"name": "George, South Africa", "lat": -33.9608, "lon": 22.4614, "tz": "Africa/Johannesburg", "country": "South Africa", "priority": 3},
        {"name": "Hermanus, South Africa", "lat": -34.4187, "lon": 19.2345, "tz": "Africa/Johannesburg", "country": "South Africa", "priority": 3},
        {"name": "Great Barrier Island, New Zealand", "lat": -36.2000, "lon": 175.4167, "tz": "Pacific/Auckland", "country": "New Zealand", "priority": 2},
        {"name": "Stewart Island, New Zealand", "lat": -46.9000, "lon": 168.1167, "tz": "Pacific/Auckland", "country": "New Zealand", "priority": 2},
        {"name": "Chatham Islands, New Zealand", "lat": -43.9500, "lon": -176.5667, "tz": "Pacific/Chatham", "country": "New Zealand", "priority": 2},
        {"name": "Auckland Islands, New Zealand", "lat": -50.7333, "lon": 166.1000, "tz": "Pacific/Auckland", "country": "New Zealand", "priority": 2},
    ],
    "cloudy": [
        {"name": "Malmö, Sweden", "lat": 55.6059, "lon": 13.0007, "tz": "Europe/Stockholm", "country": "Sweden", "priority": 5},
        {"name": "Aarhus, Denmark", "lat": 56.1629, "lon": 10.2039, "tz": "Europe/Copenhagen", "country": "Denmark", "priority": 5},
        {"name": "Turku, Finland", "lat": 60.4518, "lon": 22.2666, "tz": "Europe/Helsinki", "country": "Finland", "priority": 4},
        {"name": "Tampere, Finland", "lat": 61.4991, "lon": 23.7871, "tz": "Europe/Helsinki", "country": "Finland", "priority": 4},
        {"name": "Bremen, Germany", "lat": 53.0793, "lon": 8.8017, "tz": "Europe/Berlin", "country": "Germany", "priority": 4},
        {"name": "Hannover, Germany", "lat": 52.3759, "lon": 9.7320, "tz": "Europe/Berlin", "country": "Germany", "priority": 4},
        {"name": "Faroe Islands, Tórshavn", "lat": 62.0079, "lon": -6.7719, "tz": "Atlantic/Faroe", "country": "Faroe Islands", "priority": 4},
        {"name": "Ushuaia, Argentina", "lat": -54.8019, "lon": -68.3030, "tz": "America/Argentina/Ushuaia", "country": "Argentina", "priority": 4},
        {"name": "Puerto Natales, Chile", "lat": -51.7236, "lon": -72.5064, "tz": "America/Punta_Arenas", "country": "Chile", "priority": 4},
        {"name": "Hobart, Tasmania", "lat": -42.8821, "lon": 147.3272, "tz": "Australia/Hobart", "country": "Australia", "priority": 4},
        {"name": "Wellington, New Zealand", "lat": -41.2865, "lon": 174.7762, "tz": "Pacific/Auckland", "country": "New Zealand", "priority": 4},
        {"name": "Prince Rupert, BC", "lat": 54.3150, "lon": -130.3209, "tz": "America/Vancouver", "country": "Canada", "priority": 4},
        {"name": "Dunedin, New Zealand", "lat": -45.8788, "lon": 170.5028, "tz": "Pacific/Auckland", "country": "New Zealand", "priority": 4},
        {"name": "Anchorage, Alaska", "lat": 61.2181, "lon": -149.9003, "tz": "America/Anchorage", "country": "United States", "priority": 4},
        {"name": "Juneau, Alaska", "lat": 58.3019, "lon": -134.4197, "tz": "America/Juneau", "country": "United States", "priority": 4},
        {"name": "Stanley, Falkland Islands", "lat": -51.6929, "lon": -57.8569, "tz": "Atlantic/Stanley", "country": "Falkland Islands", "priority": 3},
        {"name": "Tromsø, Norway", "lat": 69.6496, "lon": 18.9553, "tz": "Europe/Oslo", "country": "Norway", "priority": 3},
        {"name": "Murmansk, Russia", "lat": 68.9585, "lon": 33.0827, "tz": "Europe/Moscow", "country": "Russia", "priority": 3},
        {"name": "Nuuk, Greenland", "lat": 64.1836, "lon": -51.7214, "tz": "America/Nuuk", "country": "Greenland", "priority": 3},
        {"name": "Thunder Bay, Ontario", "lat": 48.3809, "lon": -89.2477, "tz": "America/Toronto", "country": "Canada", "priority": 3},
        {"name": "Iqaluit, Nunavut", "lat": 63.7467, "lon": -68.5170, "tz": "America/Iqaluit", "country": "Canada", "priority": 3},
        {"name": "Yellowknife, NWT", "lat": 62.4540, "lon": -114.3718, "tz": "America/Yellowknife", "country": "Canada", "priority": 3},
        {"name": "Churchill, Manitoba", "lat": 58.7684, "lon": -94.1647, "tz": "America/Winnipeg", "country": "Canada", "priority": 3},
        {"name": "Gander, Newfoundland", "lat": 48.9564, "lon": -54.6087, "tz": "America/St_Johns", "country": "Canada", "priority": 3},
        {"name": "Sitka, Alaska", "lat": 57.0531, "lon": -135.3300, "tz": "America/Sitka", "country": "United States", "priority": 3},
        {"name": "Ketchikan, Alaska", "lat": 55.3422, "lon": -131.6461, "tz": "America/Metlakatla", "country": "United States", "priority": 3},
        {"name": "Longyearbyen, Svalbard", "lat": 78.2232, "lon": 15.6267, "tz": "Arctic/Longyearbyen", "country": "Norway", "priority": 2},
        {"name": "Alert, Nunavut", "lat": 82.5018, "lon": -62.3481, "tz": "America/Toronto", "country": "Canada", "priority": 2},
        {"name": "Whitehorse, Yukon", "lat": 60.7212, "lon": -135.0568, "tz": "America/Whitehorse", "country": "Canada", "priority": 2},
        {"name": "Inuvik, NWT", "lat": 68.3607, "lon": -133.7230, "tz": "America/Inuvik", "country": "Canada", "priority": 2},
    ],
}
