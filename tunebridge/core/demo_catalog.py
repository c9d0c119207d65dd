"""
TuneBridge Demo Catalogs
데모 모드용 내장 카탈로그 (카탈로그 파일이 없을 때 사용)
"""

from typing import Any, Dict, List


def _sp(track_id, title, artist, album, genre, duration, popularity,
        acousticness, danceability, energy, valence, tempo) -> Dict[str, Any]:
    return {
        "id": track_id,
        "title": title,
        "artist": artist,
        "album": album,
        "genre": genre,
        "duration": duration,
        "popularity": popularity,
        "acousticness": acousticness,
        "danceability": danceability,
        "energy": energy,
        "valence": valence,
        "tempo": tempo,
        "external_url": f"https://open.spotify.com/track/{track_id}",
    }


def _yt(track_id, title, artist, duration, video_id) -> Dict[str, Any]:
    return {
        "id": track_id,
        "title": title,
        "artist": artist,
        "duration": duration,
        "thumbnail_url": f"https://i.ytimg.com/vi/{video_id}/medium.jpg",
        "external_url": f"https://www.youtube.com/watch?v={video_id}",
    }


SPOTIFY_DEMO_TRACKS: List[Dict[str, Any]] = [
    _sp("spotify-1", "Blinding Lights", "The Weeknd", "After Hours", "Pop", 200040, 95, 0.001, 0.514, 0.730, 0.334, 171.005),
    _sp("spotify-2", "Shape of You", "Ed Sheeran", "÷ (Divide)", "Pop", 233713, 93, 0.581, 0.825, 0.652, 0.931, 95.977),
    _sp("spotify-3", "Tum Hi Ho", "Arijit Singh", "Aashiqui 2", "Bollywood", 262000, 89, 0.456, 0.534, 0.423, 0.678, 78.5),
    _sp("spotify-4", "Kesariya", "Arijit Singh", "Brahmastra", "Bollywood", 295000, 92, 0.389, 0.612, 0.567, 0.745, 95.2),
    _sp("spotify-5", "Raabta", "Arijit Singh", "Agent Vinod", "Bollywood", 284000, 85, 0.512, 0.445, 0.398, 0.634, 82.3),
    _sp("spotify-6", "Channa Mereya", "Arijit Singh", "Ae Dil Hai Mushkil", "Bollywood", 298000, 88, 0.478, 0.389, 0.456, 0.523, 75.8),
    _sp("spotify-7", "Someone Like You", "Adele", "21", "Pop", 285000, 90, 0.892, 0.389, 0.234, 0.178, 67.5),
    _sp("spotify-8", "Perfect", "Ed Sheeran", "÷ (Divide)", "Pop", 263000, 91, 0.678, 0.456, 0.389, 0.789, 95.0),
    _sp("spotify-9", "Levitating", "Dua Lipa", "Future Nostalgia", "Pop", 203000, 94, 0.012, 0.897, 0.834, 0.915, 103.0),
    _sp("spotify-10", "Bad Habits", "Ed Sheeran", "=", "Pop", 231000, 92, 0.234, 0.734, 0.689, 0.823, 126.0),
    _sp("spotify-11", "Gaalipata", "Vijay Prakash", "Gaalipata", "Kannada", 278000, 89, 0.456, 0.678, 0.567, 0.789, 92.5),
    _sp("spotify-12", "Mungaru Male", "Vijay Prakash", "Mungaru Male", "Kannada", 295000, 91, 0.512, 0.456, 0.445, 0.723, 78.3),
    _sp("spotify-13", "Jeeva Veene", "Vijay Prakash", "Apthamitra", "Kannada", 267000, 85, 0.478, 0.534, 0.456, 0.654, 85.2),
    _sp("spotify-14", "Kadhal Anukkal", "Vijay Prakash", "Enthiran", "Tamil", 245000, 88, 0.389, 0.612, 0.578, 0.745, 95.8),
    _sp("spotify-18", "Teri Ore", "Vijay Prakash, Shreya Ghoshal", "Singh Is Kinng", "Bollywood", 312000, 92, 0.456, 0.567, 0.456, 0.734, 82.7),
    _sp("spotify-20", "Munbe Vaa", "Naresh Iyer", "Sillunu Oru Kaadhal", "Tamil", 285000, 88, 0.567, 0.445, 0.378, 0.645, 75.8),
    _sp("spotify-21", "Yenga Pona Raasa", "Karthik", "Azhagiya Tamil Magan", "Tamil", 271000, 85, 0.423, 0.612, 0.534, 0.723, 89.2),
    _sp("spotify-22", "Neeve Neeve", "Karthik", "Nenunnanu", "Telugu", 298000, 86, 0.489, 0.567, 0.445, 0.678, 83.4),
    _sp("spotify-36", "Chaudhvin Ka Chand", "Mohammed Rafi", "Chaudhvin Ka Chand", "Hindi Classic", 245000, 94, 0.789, 0.345, 0.456, 0.678, 72.5),
    _sp("spotify-37", "Gulabi Aankhein", "Mohammed Rafi", "The Train", "Hindi Classic", 234000, 92, 0.723, 0.456, 0.534, 0.789, 85.3),
    _sp("spotify-38", "Kya Hua Tera Wada", "Mohammed Rafi", "Hum Kisise Kum Naheen", "Hindi Classic", 267000, 90, 0.656, 0.389, 0.445, 0.534, 78.2),
    _sp("spotify-39", "Lag Jaa Gale", "Lata Mangeshkar", "Woh Kaun Thi", "Hindi Classic", 298000, 96, 0.834, 0.267, 0.345, 0.456, 68.7),
    _sp("spotify-40", "Pyar Kiya To Darna Kya", "Lata Mangeshkar", "Mughal-E-Azam", "Hindi Classic", 456000, 95, 0.778, 0.423, 0.567, 0.789, 95.4),
    _sp("spotify-41", "Ajeeb Dastan Hai Yeh", "Lata Mangeshkar", "Dagh", "Hindi Classic", 234000, 89, 0.712, 0.345, 0.389, 0.445, 74.8),
    _sp("spotify-42", "Roop Tera Mastana", "Kishore Kumar", "Aradhana", "Hindi Classic", 287000, 93, 0.645, 0.567, 0.634, 0.823, 102.6),
    _sp("spotify-43", "Mere Sapnon Ki Rani", "Kishore Kumar", "Aradhana", "Hindi Classic", 312000, 91, 0.578, 0.645, 0.567, 0.756, 92.8),
    _sp("spotify-44", "Zindagi Ek Safar", "Kishore Kumar", "Andaz", "Hindi Classic", 276000, 88, 0.523, 0.712, 0.634, 0.834, 108.4),
    _sp("spotify-45", "Tujhe Dekha To", "Kumar Sanu", "Dilwale Dulhania Le Jayenge", "Hindi 90s", 289000, 94, 0.456, 0.578, 0.567, 0.789, 86.7),
    _sp("spotify-46", "Ek Ladki Ko Dekha", "Kumar Sanu", "1942: A Love Story", "Hindi 90s", 345000, 92, 0.567, 0.445, 0.456, 0.678, 78.9),
    _sp("spotify-47", "Dil Hai Ke Manta Nahin", "Kumar Sanu", "Dil Hai Ke Manta Nahin", "Hindi 90s", 298000, 90, 0.489, 0.634, 0.578, 0.745, 95.3),
    _sp("spotify-48", "Papa Kehte Hain", "Udit Narayan", "Qayamat Se Qayamat Tak", "Hindi 90s", 267000, 91, 0.534, 0.567, 0.612, 0.812, 98.7),
    _sp("spotify-49", "Pehla Nasha", "Udit Narayan", "Jo Jeeta Wohi Sikandar", "Hindi 90s", 354000, 89, 0.623, 0.456, 0.534, 0.689, 82.4),
    _sp("spotify-50", "Taal Se Taal", "Alka Yagnik, Udit Narayan", "Taal", "Hindi 90s", 378000, 93, 0.345, 0.789, 0.712, 0.856, 118.6),
    _sp("spotify-51", "Kuch Kuch Hota Hai", "Alka Yagnik, Udit Narayan", "Kuch Kuch Hota Hai", "Hindi 90s", 324000, 95, 0.456, 0.634, 0.578, 0.823, 92.8),
    _sp("spotify-52", "Kal Ho Naa Ho", "Sonu Nigam", "Kal Ho Naa Ho", "Hindi 2000s", 324000, 96, 0.567, 0.445, 0.456, 0.634, 76.5),
    _sp("spotify-53", "Suraj Hua Maddham", "Sonu Nigam, Alka Yagnik", "Kabhi Khushi Kabhie Gham", "Hindi 2000s", 398000, 94, 0.634, 0.456, 0.512, 0.789, 84.7),
    _sp("spotify-54", "Sandese Aate Hai", "Sonu Nigam", "Border", "Hindi Patriotic", 456000, 92, 0.723, 0.234, 0.445, 0.567, 68.9),
    _sp("spotify-55", "Abhi Mujh Mein Kahin", "Sonu Nigam", "Agneepath", "Hindi 2000s", 356000, 90, 0.678, 0.345, 0.389, 0.456, 72.3),
    _sp("spotify-56", "Tadap Tadap", "KK", "Hum Dil De Chuke Sanam", "Hindi 2000s", 456000, 93, 0.567, 0.445, 0.634, 0.456, 88.4),
    _sp("spotify-57", "Khuda Jaane", "KK, Shilpa Rao", "Bachna Ae Haseeno", "Hindi 2000s", 287000, 91, 0.489, 0.578, 0.567, 0.723, 92.6),
    _sp("spotify-58", "Zara Sa", "KK", "Jannat", "Hindi 2000s", 234000, 89, 0.623, 0.456, 0.445, 0.678, 78.7),
    _sp("spotify-59", "Paatum Naane", "T.M. Soundararajan", "Annai Velankanni", "Tamil Classic", 345000, 87, 0.756, 0.345, 0.456, 0.678, 75.8),
    _sp("spotify-60", "Mullai Malar Mele", "P. Susheela", "Pasamalar", "Tamil Classic", 298000, 86, 0.678, 0.389, 0.345, 0.567, 68.4),
    _sp("spotify-61", "Mannil Indha Kadhaley", "S.P. Balasubrahmanyam", "Keladi Kanmani", "Tamil 80s", 267000, 92, 0.534, 0.567, 0.456, 0.789, 86.7),
    _sp("spotify-62", "Chinna Chinna Aasai", "S.P. Balasubrahmanyam", "Roja", "Tamil 90s", 289000, 94, 0.456, 0.634, 0.578, 0.823, 98.5),
    _sp("spotify-63", "Raga Behag", "Hariharan", "Classical Collection", "Tamil Classical", 423000, 88, 0.834, 0.234, 0.345, 0.567, 65.2),
    _sp("spotify-64", "Bhale Bhale Magadivoy", "Ghantasala", "Mayabazar", "Telugu Classic", 234000, 89, 0.723, 0.456, 0.534, 0.678, 92.3),
    _sp("spotify-65", "Jagadeka Veerudu", "S.P. Balasubrahmanyam", "Jagadeka Veerudu Athiloka Sundari", "Telugu 90s", 298000, 91, 0.445, 0.667, 0.634, 0.789, 105.4),
    _sp("spotify-66", "Ei Path Jodi Na Shesh Hoy", "Hemanta Mukherjee", "Saptapadi", "Bengali Classic", 345000, 85, 0.778, 0.234, 0.345, 0.456, 68.7),
    _sp("spotify-67", "Coffee Houser Sei Addata", "Manna Dey", "Bengali Hits", "Bengali Classic", 267000, 86, 0.645, 0.456, 0.534, 0.678, 88.9),
    _sp("spotify-68", "Teri Ore", "Shreya Ghoshal, Rahat Fateh Ali Khan", "Singh Is Kinng", "Hindi Contemporary", 312000, 94, 0.567, 0.456, 0.456, 0.734, 82.7),
    _sp("spotify-69", "Manwa Laage", "Shreya Ghoshal, Shaan", "Happy New Year", "Hindi Contemporary", 289000, 92, 0.445, 0.634, 0.567, 0.789, 95.6),
    _sp("spotify-70", "Jiya Dhadak Dhadak", "Rahat Fateh Ali Khan", "Kalyug", "Hindi Sufi", 356000, 90, 0.678, 0.389, 0.456, 0.567, 78.4),
    _sp("spotify-71", "Tumhe Dillagi", "Rahat Fateh Ali Khan", "Hum Dil De Chuke Sanam", "Hindi Sufi", 423000, 89, 0.734, 0.267, 0.389, 0.445, 68.9),
    _sp("spotify-73", "Ishq Bina", "Rahat Fateh Ali Khan", "Taal Se Taal", "Punjabi Sufi", 298000, 87, 0.567, 0.445, 0.456, 0.623, 82.3),
    _sp("spotify-74", "Tera Hone Laga Hoon", "Atif Aslam", "Ajab Prem Ki Ghazab Kahani", "Hindi Contemporary", 298000, 93, 0.567, 0.456, 0.478, 0.734, 84.5),
    _sp("spotify-75", "Tere Sang Yaara", "Atif Aslam", "Rustom", "Hindi Contemporary", 276000, 91, 0.623, 0.445, 0.456, 0.678, 78.9),
    _sp("spotify-76", "Tum Se Hi", "Mohit Chauhan", "Jab We Met", "Hindi Contemporary", 289000, 90, 0.534, 0.578, 0.512, 0.789, 92.3),
    _sp("spotify-77", "Masakali", "Mohit Chauhan", "Delhi-6", "Hindi Contemporary", 245000, 89, 0.456, 0.634, 0.567, 0.823, 108.7),
    _sp("spotify-78", "Bol Do Na Zara", "Armaan Malik", "Azhar", "Hindi New Gen", 234000, 88, 0.478, 0.556, 0.523, 0.712, 88.4),
    _sp("spotify-79", "Wajah Tum Ho", "Armaan Malik", "Hate Story 3", "Hindi New Gen", 267000, 86, 0.567, 0.445, 0.456, 0.634, 76.8),
    _sp("spotify-80", "Kaabil Hoon", "Jubin Nautiyal", "Kaabil", "Hindi New Gen", 298000, 87, 0.534, 0.467, 0.489, 0.678, 82.6),
    _sp("spotify-81", "Adiye", "Sid Sriram", "Kadal", "Tamil Contemporary", 276000, 89, 0.623, 0.445, 0.456, 0.678, 78.5),
    _sp("spotify-83", "Why This Kolaveri Di", "Dhanush", "3", "Tamil Viral", 234000, 95, 0.345, 0.789, 0.712, 0.889, 132.5),
    _sp("spotify-84", "Harivarasanam", "K.J. Yesudas", "Sabarimala Songs", "Malayalam Devotional", 456000, 88, 0.823, 0.234, 0.345, 0.567, 65.4),
    _sp("spotify-85", "Gowri Ganesha", "K.J. Yesudas", "Malayalam Classics", "Malayalam Classic", 345000, 86, 0.734, 0.345, 0.456, 0.678, 78.9),
    _sp("spotify-87", "cold/mess", "Prateek Kuhad", "cold/mess", "Hindi Indie", 234000, 87, 0.734, 0.445, 0.367, 0.456, 72.5),
    _sp("spotify-88", "Choo Lo", "The Local Train", "Aalas Ka Pedh", "Hindi Rock", 298000, 85, 0.234, 0.567, 0.734, 0.678, 115.6),
]


YOUTUBE_DEMO_TRACKS: List[Dict[str, Any]] = [
    _yt("youtube-1", "Blinding Lights - Official Video", "The Weeknd", 200000, "fHI8X4OXluQ"),
    _yt("youtube-2", "Shape of You - Official Video", "Ed Sheeran", 233000, "JGwWNGJdvx8"),
    _yt("youtube-3", "Tum Hi Ho - Full Video Song", "Arijit Singh", 262000, "IJq0yyWug1k"),
    _yt("youtube-4", "Kesariya - Official Video | Brahmastra", "Arijit Singh", 295000, "kVaWke2vpgE"),
    _yt("youtube-5", "Raabta - Title Song Video", "Arijit Singh", 284000, "eQp9kvseLHs"),
    _yt("youtube-6", "Channa Mereya - Full Video | Ae Dil Hai Mushkil", "Arijit Singh", 298000, "bzSTpdcs-EI"),
    _yt("youtube-7", "Arijit Singh Live Performance - Best Songs", "Arijit Singh", 3600000, "LIVE123"),
    _yt("youtube-8", "Someone Like You - Live from the Royal Albert Hall", "Adele", 285000, "hLQl3WQQoQ0"),
    _yt("youtube-9", "Perfect - Official Music Video", "Ed Sheeran", 263000, "2Vv-BfVoq4g"),
    _yt("youtube-10", "Levitating - Official Music Video", "Dua Lipa", 203000, "TUVcZfQe-Kw"),
    _yt("youtube-11", "Gaalipata - Full Video Song | Kannada Hit", "Vijay Prakash", 278000, "gaalipata123"),
    _yt("youtube-12", "Mungaru Male - Title Song | Vijay Prakash | Kannada", "Vijay Prakash", 295000, "mungarumale456"),
    _yt("youtube-14", "Kadhal Anukkal - Enthiran | Vijay Prakash | A.R. Rahman", "Vijay Prakash", 245000, "kadhalanukkal"),
    _yt("youtube-20", "Munbe Vaa - Sillunu Oru Kaadhal | Naresh Iyer | Tamil", "Naresh Iyer", 285000, "munbevaa"),
    _yt("youtube-21", "Yenga Pona Raasa - Azhagiya Tamil Magan | Karthik", "Karthik", 267000, "yengapona"),
    _yt("youtube-22", "Neeve Neeve - Nenunnanu | Karthik | Telugu Melody", "Karthik", 298000, "neeveneeve"),
    _yt("youtube-36", "Chaudhvin Ka Chand Ho - Mohammed Rafi | Classic Hindi", "Mohammed Rafi", 245000, "chaudhvinkachand"),
    _yt("youtube-37", "Gulabi Aankhein - Mohammed Rafi | Evergreen Hit", "Mohammed Rafi", 234000, "gulabiankhen"),
    _yt("youtube-38", "Kya Hua Tera Wada - Mohammed Rafi | Romantic Classic", "Mohammed Rafi", 267000, "kyahuaterawada"),
    _yt("youtube-39", "Lag Jaa Gale - Lata Mangeshkar | Timeless Classic", "Lata Mangeshkar", 298000, "lagjaagale"),
    _yt("youtube-40", "Pyar Kiya To Darna Kya - Lata Mangeshkar | Mughal-E-Azam", "Lata Mangeshkar", 456000, "pyarkiyato"),
    _yt("youtube-41", "Roop Tera Mastana - Kishore Kumar | Aradhana", "Kishore Kumar", 287000, "roopteramastana"),
    _yt("youtube-42", "Mere Sapnon Ki Rani - Kishore Kumar | Classic Romance", "Kishore Kumar", 312000, "meresapnonki"),
    _yt("youtube-43", "Tujhe Dekha To - Kumar Sanu | DDLJ | Romantic Hit", "Kumar Sanu", 289000, "tujhedekhato"),
    _yt("youtube-44", "Ek Ladki Ko Dekha - Kumar Sanu | 1942 A Love Story", "Kumar Sanu", 345000, "ekladkikodekha"),
    _yt("youtube-45", "Papa Kehte Hain - Udit Narayan | QSQT | Aamir Khan", "Udit Narayan", 267000, "papakehtehain"),
    _yt("youtube-46", "Pehla Nasha - Udit Narayan | Jo Jeeta Wohi Sikandar", "Udit Narayan", 354000, "pehlanasha"),
    _yt("youtube-47", "Kal Ho Naa Ho - Sonu Nigam | Title Track | Shah Rukh Khan", "Sonu Nigam", 324000, "kalhonaaho"),
    _yt("youtube-48", "Suraj Hua Maddham - Sonu Nigam & Alka Yagnik | K3G", "Sonu Nigam, Alka Yagnik", 398000, "surajhuamaddham"),
    _yt("youtube-49", "Sandese Aate Hai - Sonu Nigam | Border | Patriotic Song", "Sonu Nigam", 456000, "sandeseaatehain"),
    _yt("youtube-50", "Abhi Mujh Mein Kahin - Sonu Nigam | Agneepath", "Sonu Nigam", 356000, "abhimujhmeinkahin"),
    _yt("youtube-51", "Tadap Tadap - KK | Hum Dil De Chuke Sanam | Emotional", "KK", 456000, "tadaptadap"),
    _yt("youtube-52", "Khuda Jaane - KK & Shilpa Rao | Bachna Ae Haseeno", "KK, Shilpa Rao", 287000, "khudajaane"),
    _yt("youtube-53", "Chinna Chinna Aasai - SPB | Roja | A.R. Rahman", "S.P. Balasubrahmanyam", 289000, "chinnachinaasai"),
    _yt("youtube-54", "Mannil Indha Kadhaley - SPB | Tamil Classic", "S.P. Balasubrahmanyam", 267000, "mannilindha"),
    _yt("youtube-55", "Jagadeka Veerudu - SPB | Telugu Hit | Chiranjeevi", "S.P. Balasubrahmanyam", 298000, "jagadekaveerudu"),
    _yt("youtube-56", "Teri Ore - Shreya Ghoshal & Rahat Fateh Ali Khan", "Shreya Ghoshal, Rahat Fateh Ali Khan", 312000, "teriore2"),
    _yt("youtube-57", "Jiya Dhadak Dhadak - Rahat Fateh Ali Khan | Kalyug", "Rahat Fateh Ali Khan", 356000, "jiyadhadak"),
    _yt("youtube-58", "Challa - Gurdas Maan | Jab We Met | Punjabi Hit", "Gurdas Maan", 234000, "challa"),
]


DEMO_CATALOGS: Dict[str, List[Dict[str, Any]]] = {
    "spotify": SPOTIFY_DEMO_TRACKS,
    "youtube": YOUTUBE_DEMO_TRACKS,
}
