"""Spanish function words.

Verb conjugation tables are left out: forms such as est*, esté, estuvimos
share too many trigrams with French and skew language profiles.
"""

STOP_WORDS = [
    "a", "al", "algo", "algunas", "algunos", "ante", "antes", "aquí",
    "así", "aunque", "bajo", "cada", "como", "con", "contra", "cual",
    "cuando", "de", "del", "desde", "donde", "durante", "e", "el",
    "ella", "ellas", "ellos", "en", "entre", "era", "eran", "es",
    "esa", "esas", "ese", "eso", "esos", "esta", "estas", "este",
    "esto", "estos", "está", "están", "estoy", "fue", "fueron", "ha",
    "han", "has", "hasta", "hay", "he", "hemos", "la", "las",
    "le", "les", "lo", "los", "me", "mi", "mis", "mientras",
    "mismo", "misma", "mucho", "muchos", "muy", "más", "mí", "nada",
    "ni", "no", "nos", "nosotros", "nuestra", "nuestro", "o", "os",
    "otra", "otras", "otro", "otros", "para", "pero", "poco", "por",
    "porque", "pues", "que", "quien", "quienes", "qué", "se", "sea",
    "ser", "si", "sido", "siempre", "sin", "sino", "sobre", "somos",
    "son", "soy", "su", "sus", "también", "tan", "tanto", "te",
    "tiene", "tienen", "todo", "todos", "tras", "tu", "tus", "tú",
    "un", "una", "uno", "unos", "vosotros", "y", "ya", "yo",
    "él", "hacia", "según", "sí", "entonces", "ahora", "después",
]
