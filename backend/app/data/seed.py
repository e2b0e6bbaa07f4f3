"""Demo data written by the bootstrap operation.

Sample inquiries carry ``hours_ago`` instead of a timestamp; the bootstrap
resolves it against the current time when the record is first written.
"""

SEED_KNOWLEDGE = [
    {
        "id": "knowledge_1",
        "title": "Cennik stron internetowych",
        "content": (
            "Strona wizytówka: 3,000-5,000 zł\n"
            "Strona firmowa: 5,000-10,000 zł\n"
            "Strona z CMS: 8,000-15,000 zł\n"
            "Sklep internetowy: 10,000-25,000 zł"
        ),
    },
    {
        "id": "knowledge_2",
        "title": "Czas realizacji projektów",
        "content": (
            "Strona wizytówka: 2-3 tygodnie\n"
            "Strona firmowa: 4-6 tygodni\n"
            "Strona z CMS: 6-8 tygodni\n"
            "Sklep internetowy: 8-12 tygodni"
        ),
    },
    {
        "id": "knowledge_3",
        "title": "Usługi dodatkowe",
        "content": (
            "Logo i identyfikacja wizualna: 2,000-5,000 zł\n"
            "Fotografia produktowa: 500-1,500 zł\n"
            "Kopywriting: 300-800 zł/strona\n"
            "Optymalizacja SEO: 1,500-3,000 zł"
        ),
    },
]

SEED_INQUIRIES = [
    {
        "id": "inquiry_sample_1",
        "customerName": "Anna Kowalska",
        "email": "anna.kowalska@example.com",
        "subject": "Wycena strony internetowej dla salonu fryzjerskiego",
        "message": (
            "Witam, prowadzę salon fryzjerski i potrzebuję profesjonalnej strony internetowej. "
            "Chciałabym mieć galerię prac, informacje o usługach, cennik oraz możliwość umawiania "
            "wizyt online. Jaka byłaby wycena takiego projektu?"
        ),
        "category": "pricing",
        "status": "pending",
        "hours_ago": 2,
        "aiSuggestion": (
            "Dziękuję za zainteresowanie naszymi usługami! Dla salonu fryzjerskiego z galerią, "
            "cennikiem i systemem rezerwacji szacunkowa wycena wynosi 12,000-18,000 zł. Projekt "
            "obejmuje responsywny design, system CMS do zarządzania treścią oraz integrację z "
            "kalendarzem rezerwacji. Oferujemy bezpłatną konsultację, podczas której omówimy "
            "szczegóły i dostosujemy ofertę do Państwa potrzeb."
        ),
        "confidence": 94,
    },
    {
        "id": "inquiry_sample_2",
        "customerName": "Marek Nowak",
        "email": "marek.nowak@techfirma.pl",
        "subject": "Czas realizacji sklepu internetowego",
        "message": (
            "Dzień dobry, nasza firma planuje uruchomić sklep internetowy z elektroniką. "
            "Potrzebujemy około 200 produktów, system płatności, integrację z hurtowniami i "
            "zaawansowane filtry wyszukiwania. Jaki jest przewidywany czas realizacji takiego projektu?"
        ),
        "category": "timeline",
        "status": "approved",
        "hours_ago": 5,
        "aiSuggestion": (
            "Dziękuję za zapytanie! Sklep internetowy z 200 produktami, systemem płatności i "
            "integracjami wymaga dokładnego planowania. Przewidywany czas realizacji to 10-14 "
            "tygodni, obejmujący: projektowanie (2 tygodnie), programowanie (6-8 tygodni), "
            "integracje (2 tygodnie), testy i wdrożenie (2 tygodnie). Możemy rozpocząć prace w "
            "styczniu 2025. Czy chcieliby Państwo omówić szczegółowy harmonogram?"
        ),
        "confidence": 91,
    },
    {
        "id": "inquiry_sample_3",
        "customerName": "Katarzyna Wiśniewska",
        "email": "k.wisniewska@creativestudio.com",
        "subject": "Kompleksowa identyfikacja wizualna",
        "message": (
            "Witam, uruchamiamy nową agencję kreatywną i potrzebujemy kompleksowej identyfikacji "
            "wizualnej. Interesuje nas logo, papeteria firmowa, strona internetowa oraz materiały "
            "marketingowe. Czy oferujecie takie kompleksowe usługi?"
        ),
        "category": "product",
        "status": "approved",
        "hours_ago": 8,
        "aiSuggestion": (
            "Tak, oferujemy kompleksowe usługi brandingowe! Nasz pakiet dla agencji kreatywnej "
            "obejmuje: projektowanie logo i identyfikacji wizualnej, papeterię firmową (wizytówki, "
            "papier firmowy, teczki), responsywną stronę internetową oraz materiały marketingowe. "
            "Koszt pakietu: 20,000-28,000 zł, czas realizacji: 8-10 tygodni. Każdy projekt "
            "rozpoczynamy od sesji strategicznej, aby idealnie oddać charakter Państwa marki."
        ),
        "confidence": 96,
    },
    {
        "id": "inquiry_sample_4",
        "customerName": "Piotr Zieliński",
        "email": "piotr@restauracjasmaki.pl",
        "subject": "Strona dla restauracji z systemem zamówień",
        "message": (
            "Dzień dobry, mam restaurację i chciałbym stronę internetową z menu online i "
            "możliwością składania zamówień na wynos. Dodatkowo potrzebuję integrację z systemami "
            "płatności. Czy to możliwe?"
        ),
        "category": "product",
        "status": "pending",
        "hours_ago": 12,
        "aiSuggestion": (
            "Oczywiście! Tworzymy profesjonalne strony dla restauracji z pełną funkcjonalnością "
            "zamówień online. Oferujemy: prezentację menu z możliwością konfiguracji, koszyk "
            "zamówień, integrację z płatnościami online, panel administracyjny do zarządzania "
            "zamówieniami. Szacunkowy koszt: 15,000-22,000 zł, czas realizacji: 6-8 tygodni. "
            "Dodatkowo możemy zintegrować system z popularnymi platformami dostawczymi."
        ),
        "confidence": 93,
    },
    {
        "id": "inquiry_sample_5",
        "customerName": "Maria Kowal",
        "email": "maria@zielonaenergia.pl",
        "subject": "Modernizacja starej strony firmowej",
        "message": (
            "Witam, nasza firma zajmuje się odnawialnymi źródłami energii i mamy przestarzałą "
            "stronę z 2018 roku. Potrzebujemy jej pełnej modernizacji - nowy design, lepsze SEO, "
            "responsywność i szybkość ładowania."
        ),
        "category": "general",
        "status": "pending",
        "hours_ago": 18,
        "aiSuggestion": (
            "Dziękuję za zapytanie! Modernizacja strony to doskonała inwestycja. Oferujemy: "
            "całkowity redesign w nowoczesnym stylu, optymalizację SEO, responsywny design, "
            "przyspieszenie ładowania, aktualizację contentu. Dla firm z branży OZE mamy "
            "doświadczenie w tworzeniu stron technicznych. Koszt modernizacji: 10,000-16,000 zł, "
            "czas realizacji: 5-7 tygodni. Możemy przeprowadzić bezpłatny audyt obecnej strony."
        ),
        "confidence": 89,
    },
    {
        "id": "inquiry_sample_6",
        "customerName": "Tomasz Krawczyk",
        "email": "tomasz@fitnessstudio.com",
        "subject": "Landing page dla nowego studia fitness",
        "message": (
            "Cześć! Otwieram nowe studio fitness i potrzebuję landing page do promocji opening'u. "
            "Chciałbym formularz zapisów, galerię zdjęć, cennik karnetów i mapę dojazdu. Kiedy "
            "moglibyście to zrealizować?"
        ),
        "category": "timeline",
        "status": "rejected",
        "hours_ago": 24,
        "aiSuggestion": (
            "Świetny pomysł na promocję otwarcia! Landing page dla studia fitness z formularzem "
            "zapisów, galerią, cennikiem i mapą to standardowy projekt dla nas. Czas realizacji: "
            "3-4 tygodnie, koszt: 6,000-9,000 zł. Możemy rozpocząć już w tym tygodniu, aby zdążyć "
            "z promocją otwarcia. Dodatkowo oferujemy integrację z social media i Google Analytics "
            "do śledzenia konwersji."
        ),
        "confidence": 87,
    },
    {
        "id": "inquiry_sample_7",
        "customerName": "Agnieszka Pawlak",
        "email": "agnieszka@prawnik-online.pl",
        "subject": "Strona dla kancelarii prawnej z blogiem",
        "message": (
            "Dzień dobry, jestem prawnikiem i potrzebuję profesjonalnej strony internetowej. "
            "Chciałabym mieć sekcję o specjalizacjach, blog z artykułami prawnymi, formularz "
            "kontaktowy i możliwość umówienia konsultacji online."
        ),
        "category": "pricing",
        "status": "pending",
        "hours_ago": 36,
        "aiSuggestion": (
            "Dziękuję za zainteresowanie! Strony dla kancelarii prawnych to nasza specjalizacja. "
            "Oferujemy: profesjonalny design budujący zaufanie, sekcję usług z opisami "
            "specjalizacji, blog z CMS, bezpieczny formularz kontaktowy, kalendarz konsultacji "
            "online, optymalizację SEO dla branży prawniczej. Szacunkowa wycena: 8,000-14,000 zł, "
            "czas realizacji: 4-6 tygodni. Zapewniamy zgodność z RODO."
        ),
        "confidence": 92,
    },
    {
        "id": "inquiry_sample_8",
        "customerName": "Robert Maj",
        "email": "robert@stolarzmistrz.pl",
        "subject": "Portfolio dla stolarza z galerią prac",
        "message": (
            "Witam, jestem stolarzem i chciałbym mieć stronę internetową prezentującą moje prace. "
            "Potrzebuję dużą galerię zdjęć, opisy usług, referencje klientów i formularz wyceny online."
        ),
        "category": "product",
        "status": "approved",
        "hours_ago": 48,
        "aiSuggestion": (
            "Doskonały pomysł na prezentację rzemiosła! Dla stolarzy tworzymy strony z elegancką "
            "galerią prac, opisami usług, sekcją referencji i formularzem wyceny. Dodatkowo: "
            "optymalizacja zdjęć, responsywny design, SEO lokalne. Koszt: 7,000-12,000 zł, czas "
            "realizacji: 4-5 tygodni. Możemy też dodać kalkulator kosztów dla standardowych prac "
            "stolarskich."
        ),
        "confidence": 90,
    },
]

SEED_STATS = {
    "approved": 4,
    "rejected": 1,
    "avgAccuracy": 91,
    "totalProcessed": 8,
}
