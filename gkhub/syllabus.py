"""Exam syllabus, quick topics and important chapters offered on the home screen."""

FULL_SYLLABUS = [
    {
        "title": "1. વિશ્વ અને ભારત – પરિચય",
        "subtopics": [
            "વિશ્વનું સામાન્ય પરિચય",
            "વિશ્વના ખંડો",
            "વિશ્વના મહાસાગરો",
            "વિશ્વના મહત્વપૂર્ણ દેશો",
            "ભારતનો પરિચય"
        ],
    },
    {
        "title": "2. ઇતિહાસ (History)",
        "subtopics": [
            "2.1 ભારતનો ઇતિહાસ",
            "પ્રાગૈતિહાસિક કાળ",
            "સિંધુ ઘાટીની સંસ્કૃતિ",
            "વૈદિક કાળ",
            "મૌર્ય યુગ",
            "ગુપ્ત યુગ",
            "હર્ષવર્ધન",
            "દિલ્લી સલ્તનત",
            "મુઘલ યુગ",
            "આધુનિક ભારત",
            "1857 ની ક્રાંતિ",
            "ભારતીય સ્વાતંત્ર્ય આંદોલન",
            "મહાત્મા ગાંધી",
            "2.2 ગુજરાતનો ઇતિહાસ",
            "પ્રાચીન ગુજરાત",
            "સોલંકી યુગ",
            "ગુજરાત સલ્તનત",
            "મરાઠા શાસન",
            "બ્રિટિશ કાળ",
            "સ્વાતંત્ર્ય આંદોલનમાં ગુજરાત",
            "દાંડી યાત્રા"
        ],
    },
    {
        "title": "3. ભૂગોળ (Geography)",
        "subtopics": [
            "3.1 વિશ્વનું ભૂગોળ",
            "ખંડો અને મહાસાગરો",
            "પર્વતમાળા",
            "નદીઓ",
            "રણ અને મેદાનો",
            "હવામાન પ્રદેશો",
            "વિશ્વના સમય ઝોન",
            "3.2 ભારતનું ભૂગોળ",
            "ભારતની ભૌતિક રચના",
            "હિમાલય",
            "ભારતીય નદીઓ",
            "ભારતીય હવામાન",
            "માટીના પ્રકાર",
            "કૃષિ",
            "ઉદ્યોગ",
            "પરિવહન",
            "3.3 ગુજરાતનું ભૂગોળ",
            "ભૌતિક રચના",
            "નદીઓ",
            "હવામાન",
            "કૃષિ",
            "ઉદ્યોગ",
            "બંદરો",
            "ઊર્જા સ્ત્રોત",
            "પરિવહન (ગુજરાત)",
            "અભયારણ્ય અને નેશનલ પાર્ક"
        ],
    },
    {
        "title": "4. ભારતીય સંવિધાન (Indian Constitution)",
        "subtopics": [
            "1. ભારતીય સંવિધાન – પરિચય",
            "2. ભારતીય સંવિધાનનો ઇતિહાસ",
            "3. સંવિધાન સભા (Constituent Assembly)",
            "4. પ્રસ્તાવના (Preamble)",
            "5. સંઘીય વ્યવસ્થા (Federal System)",
            "6. નાગરિકતા (Citizenship)",
            "7. મૂળ અધિકારો (Fundamental Rights)",
            "8. રાજ્યના માર્ગદર્શક સિદ્ધાંતો (DPSP)",
            "9. મૂળ ફરજો (Fundamental Duties)",
            "10. સંઘની કાર્યપાલિકા (President, PM)",
            "11. સંઘની વિધાનમંડળ (Parliament)",
            "12. સંઘની ન્યાયપાલિકા (Supreme Court)",
            "13. રાજ્ય સરકાર (State Govt)",
            "14. ઉચ્ચ ન્યાયાલય (High Court)",
            "15. સ્થાનિક સ્વરાજ્ય (Panchayati Raj)",
            "16. બંધારણીય સંસ્થાઓ (EC, UPSC, CAG)",
            "17. આપાતકાલીન જોગવાઈઓ (Emergency)",
            "18. સંવિધાનમાં સુધારા (Amendments)",
            "19. વિશેષ જોગવાઈઓ (SC/ST/Minorities)",
            "20. અનુસૂચિઓ (Schedules)"
        ],
    },
    {
        "title": "5. અર્થવ્યવસ્થા (Economy)",
        "subtopics": [
            "ભારતીય અર્થવ્યવસ્થાનો પરિચય",
            "કૃષિ ક્ષેત્ર",
            "ઉદ્યોગ ક્ષેત્ર",
            "સેવા ક્ષેત્ર",
            "રાષ્ટ્રીય આવક",
            "બજેટ",
            "કર પ્રણાલી",
            "બેંકિંગ અને RBI",
            "મોંઘવારી",
            "ગરીબી",
            "બેરોજગારી",
            "સરકારી યોજનાઓ",
            "ગુજરાતની આર્થિક યોજનાઓ"
        ],
    },
    {
        "title": "6. સામાન્ય વિજ્ઞાન (General Science)",
        "subtopics": [
            "6.1 ભૌતિક વિજ્ઞાન: ગતિ, ઊર્જા, પ્રકાશ, વિદ્યુત, ધ્વનિ",
            "6.2 રસાયણ વિજ્ઞાન: તત્વો, સંયોજનો, આયર્ન-ક્ષાર, ધાતુ-અધાતુ",
            "6.3 જીવ વિજ્ઞાન: માનવ શરીર, રોગો, પોષણ, વનસ્પતિ",
            "દૈનિક જીવનમાં વિજ્ઞાન",
            "One Liner Science Facts"
        ],
    },
    {
        "title": "7. પર્યાવરણ અને ઇકોલોજી",
        "subtopics": [
            "પર્યાવરણ અને પરિસ્થિતિ તંત્ર",
            "જલવાયુ પરિવર્તન",
            "પ્રદૂષણ",
            "વન સંરક્ષણ",
            "વન્યજીવન",
            "પર્યાવરણ કાયદા"
        ],
    },
    {
        "title": "8. કમ્પ્યુટર અને ટેકનોલોજી",
        "subtopics": [
            "કમ્પ્યુટર પરિચય",
            "હાર્ડવેર અને સોફ્ટવેર",
            "ઇન્ટરનેટ અને ઇ-ગવર્નન્સ",
            "AI અને નવી ટેકનોલોજી",
            "સાયબર સુરક્ષા"
        ],
    },
    {
        "title": "9. રમતગમત (Sports)",
        "subtopics": [
            "રાષ્ટ્રીય અને આંતરરાષ્ટ્રીય રમતગમત",
            "કપ અને ટ્રોફી",
            "ખેલાડીઓ",
            "રમતગમત પુરસ્કારો"
        ],
    },
    {
        "title": "10. પુરસ્કાર અને સન્માન",
        "subtopics": [
            "ભારત રત્ન",
            "પદ્મ પુરસ્કાર",
            "રાષ્ટ્રીય પુરસ્કારો",
            "આંતરરાષ્ટ્રીય પુરસ્કારો"
        ],
    },
    {
        "title": "11. વર્તમાન પ્રવાહ (Current Affairs 2026)",
        "subtopics": [
            "1. રાષ્ટ્રીય વર્તમાન પ્રવાહ (National CA)",
            "2. રાજ્ય વર્તમાન પ્રવાહ – ગુજરાત (Gujarat CA)",
            "3. આંતરરાષ્ટ્રીય વર્તમાન પ્રવાહ (International CA)",
            "4. અર્થવ્યવસ્થા અને નાણાકીય સમાચાર",
            "5. વિજ્ઞાન અને ટેકનોલોજી",
            "6. પર્યાવરણ અને જલવાયુ",
            "7. રમતગમત વર્તમાન પ્રવાહ",
            "8. પુરસ્કાર અને સન્માન",
            "9. નિમણૂકો અને રાજીનામા",
            "10. અવસાન (Obituary)",
            "11. મહત્વપૂર્ણ દિવસો અને થીમ",
            "12. સંસ્થાઓ અને મુખ્યાલય",
            "13. અહેવાલ, ઇન્ડેક્સ અને રેન્કિંગ",
            "14. સંક્ષેપ શબ્દો (Abbreviations)",
            "15. વિવિધ વર્તમાન વિષયો (Books, Places, Culture)"
        ],
    },
    {
        "title": "12. વિવિધ સામાન્ય જ્ઞાન (Misc GK)",
        "subtopics": [
            "મહત્વપૂર્ણ પુસ્તક અને લેખક",
            "મહત્વપૂર્ણ સ્થળો",
            "સંક્ષેપ શબ્દો (Abbreviations)",
            "ઉપનામ",
            "મહત્વપૂર્ણ સૂત્રો",
            "રાષ્ટ્રીય ચિહ્નો",
            "મહત્વપૂર્ણ દિવસો (Important Days)",
            "સંસ્થાઓ અને મુખ્યાલય (Organizations)"
        ],
    },
    {
        "title": "13. કાયદા અને પોલીસ કામગીરી (Law & Police Dept)",
        "subtopics": [
            "પોલીસ વિભાગની રચના અને પદાનુક્રમ",
            "પોલીસની ફરજો અને સત્તાઓ",
            "IPC (ભારતીય દંડ સંહિતા)",
            "CrPC (ફોજદારી કાર્યરીતિ અધિનિયમ)",
            "Evidence Act (પુરાવા અધિનિયમ)",
            "માનવ અધિકારો અને પોલીસ",
            "પોલીસ વર્તન અને શિસ્ત",
            "ટ્રાફિક કાયદા",
            "સાયબર ક્રાઈમ કાયદા",
            "મહિલા અને બાળ સુરક્ષા કાયદા"
        ],
    },
    {
        "title": "14. તર્કશક્તિ (Reasoning - Niraj Bharvad)",
        "subtopics": [
            "13. તર્કશક્તિ પરિચય",
            "14. ઉપમા (Analogy)",
            "15. શ્રેણી (Series)",
            "16. વર્ગીકરણ (Classification)",
            "17. કોડિંગ–ડિકોડિંગ",
            "18. દિશા જ્ઞાન (Direction Sense)",
            "19. લોહી સંબંધ (Blood Relation)",
            "20. બેઠકોની વ્યવસ્થા (Seating Arrangement)",
            "21. સિલોગિઝમ (Syllogism)",
            "22. નિવેદન અને અનુમાન (Statement & Assumption)",
            "23. ક્રમ અને સ્થાન (Order & Ranking)",
            "24. પઝલ (Puzzle)",
            "25. આકૃતિ આધારિત તર્ક (Non-Verbal Reasoning)"
        ],
    },
    {
        "title": "15. ગણિત (Mathematics - Niraj Bharvad)",
        "subtopics": [
            "1. સંખ્યા પદ્ધતિ (Number System)",
            "2. સરવાળો, બાદબાકી, ગુણાકાર, ભાગાકાર",
            "3. ટકા (Percentage)",
            "4. અનુપાત અને પ્રમાણ (Ratio & Proportion)",
            "5. નફો અને નુકસાન (Profit & Loss)",
            "6. વ્યાજ (Interest)",
            "7. સરેરાશ (Average)",
            "8. સમય અને કામ (Time & Work)",
            "9. સમય અને ઝડપ (Time & Speed)",
            "10. ક્ષેત્રફળ અને પરિમિતિ (Mensuration)",
            "11. માપ અને એકમો (Units & Measurements)",
            "12. આંકડાશાસ્ત્ર (Data Interpretation)"
        ],
    },
    {
        "title": "16. ગુજરાત સાંસ્કૃતિક વારસો (Gujarat Culture)",
        "subtopics": [
            "ગુજરાતની સંસ્કૃતિ - પરિચય",
            "લોકનૃત્ય અને નાટ્યકળા",
            "લોકસાહિત્ય અને ભવાઈ",
            "ગુજરાતના મેળા અને ઉત્સવો",
            "ગુજરાતના સંતો અને મહાનુભાવો",
            "ગુજરાતી ભાષા અને બોલીઓ",
            "સ્થાપત્ય અને શિલ્પકળા"
        ],
    },
    {
        "title": "17. PSI મેઇન્સ (Descriptive Writing)",
        "subtopics": [
            "ગુજરાતી નિબંધ લેખન",
            "વર્ણનાત્મક લેખન પદ્ધતિ",
            "ભાષા શુદ્ધિ અને વ્યાકરણ",
            "રિપોર્ટ રાઇટિંગ",
            "પત્ર લેખન"
        ],
    },
    {
        "title": "18. અગાઉના પ્રશ્નપત્રો (PYQ Analysis)",
        "subtopics": [
            "PSI પ્રિલિમ્સ પેપર વિશ્લેષણ",
            "Constable પેપર વિશ્લેષણ",
            "Cut-off Analysis",
            "વારંવાર પૂછાતા પ્રશ્નો (Repeated Topics)"
        ],
    },
]

QUICK_TOPICS = [
    {"title": "ગુજરાતનો ઈતિહાસ", "query": "ગુજરાતનો ઈતિહાસ અને સંસ્કૃતિ"},
    {"title": "ગુજરાતની ભૂગોળ", "query": "ગુજરાતની ભૌગોલિક સ્થિતિ અને વિશેષતાઓ"},
    {"title": "ભારતનું બંધારણ", "query": "ભારતનું બંધારણ અને આમુખ"},
    {"title": "કાયદો (IPC/CRPC)", "query": "IPC, CRPC અને Evidence Act કાયદાની કલમો"},
    {"title": "સામાન્ય વિજ્ઞાન", "query": "સામાન્ય વિજ્ઞાન અને ટેકનોલોજી"},
    {"title": "રીઝનિંગ", "query": "તાર્કિક કસોટી અને બુદ્ધિક્ષમતા (Reasoning)"},
    {"title": "ગણિત (Maths)", "query": "સામાન્ય ગણિત અને અંકગણિત"},
    {"title": "કમ્પ્યુટર", "query": "કમ્પ્યુટર એક પરિચય અને ઉપયોગો"},
    {"title": "વર્તમાન પ્રવાહો", "query": "તાજેતરના વર્તમાન પ્રવાહો (Current Affairs)"},
    {"title": "ગુજરાતી સાહિત્ય", "query": "ગુજરાતી સાહિત્યકાર અને કૃતિઓ"},
    {"title": "રમત ગમત", "query": "રમત ગમત અને પુરસ્કારો"},
    {"title": "મનોવિજ્ઞાન", "query": "સામાન્ય મનોવિજ્ઞાન (Psychology)"},
    {"title": "સમાજશાસ્ત્ર", "query": "સમાજશાસ્ત્ર પરિચય"},
    {"title": "પંચાયતી રાજ", "query": "પંચાયતી રાજ વ્યવસ્થા"},
    {"title": "પર્યાવરણ", "query": "પર્યાવરણ અને પ્રદૂષણ"},
    {"title": "સાંસ્કૃતિક વારસો", "query": "ગુજરાતનો સાંસ્કૃતિક વારસો"},
]

IMPORTANT_CHAPTERS = [
    {"title": "IPC મહત્વની કલમો", "desc": "Law IMP", "query": "IPC ની સૌથી મહત્વની કલમો અને સજા"},
    {"title": "ગુજરાતના જિલ્લા", "desc": "Geography", "query": "ગુજરાતના તમામ જિલ્લા અને વિશેષતાઓ"},
    {"title": "સોલંકી વંશ", "desc": "History", "query": "સોલંકી વંશ - ગુજરાતનો સુવર્ણ યુગ"},
    {"title": "મહાગુજરાત આંદોલન", "desc": "History", "query": "મહાગુજરાત આંદોલન અને ઇન્દુલાલ યાજ્ઞિક"},
    {"title": "કમ્પ્યુટર શોર્ટકટ કી", "desc": "Computer", "query": "કમ્પ્યુટર શોર્ટકટ કી અને ફૂલ ફોર્મ"},
    {"title": "ભારતના રાષ્ટ્રપતિ", "desc": "Constitution", "query": "ભારતના રાષ્ટ્રપતિ - કલમો અને સત્તા"},
    {"title": "સાહિત્ય અકાદમી", "desc": "Literature", "query": "ગુજરાતી સાહિત્ય અકાદમી અને પુરસ્કારો"},
    {"title": "રોગ અને વિટામિન", "desc": "Science", "query": "વિજ્ઞાન - રોગો, વિટામિન અને શોધ"},
]


def all_subtopics():
    return [subtopic for category in FULL_SYLLABUS for subtopic in category["subtopics"]]


def category_progress(category, completed_topics):
    """Returns (done, total) subtopic counts for a syllabus category."""
    done = sum(1 for subtopic in category["subtopics"] if subtopic in completed_topics)
    return done, len(category["subtopics"])
