"""
Built-in dictionary and typo tables.

Both are tuples of (key, value) pairs rather than dict literals: a few keys are defined more
than once (sometimes with different values) and the lexicon builder needs to see every
definition to keep the first one and report the rest.
"""

from __future__ import annotations

NAME_ENTRIES: tuple[tuple[str, str], ...] = (
    # Surnames
    ("kumar", "कुमार"), ("sharma", "शर्मा"), ("singh", "सिंह"), ("verma", "वर्मा"),
    ("gupta", "गुप्ता"), ("patel", "पटेल"), ("yadav", "यादव"), ("reddy", "रेड्डी"),
    ("nair", "नायर"), ("jha", "झा"), ("mishra", "मिश्रा"), ("pandey", "पांडेय"),
    ("tiwari", "तिवारी"), ("tripathi", "त्रिपाठी"), ("chaudhary", "चौधरी"),
    ("jain", "जैन"), ("agarwal", "अग्रवाल"), ("joshi", "जोशी"), ("mehta", "मेहता"),
    ("shah", "शाह"), ("kapoor", "कपूर"), ("malhotra", "मल्होत्रा"), ("khanna", "खन्ना"),
    ("bhatia", "भाटिया"), ("sethi", "सेठी"), ("arora", "अरोड़ा"), ("chopra", "चोपड़ा"),
    ("bansal", "बंसल"), ("goel", "गोयल"), ("goyal", "गोयल"), ("singhal", "सिंघल"),
    ("bajaj", "बजाज"), ("mittal", "मित्तल"), ("jindal", "जिंदल"), ("garg", "गर्ग"),
    ("saxena", "सक्सेना"), ("srivastava", "श्रीवास्तव"), ("chaturvedi", "चतुर्वेदी"),
    ("dwivedi", "द्विवेदी"), ("shukla", "शुक्ला"), ("dubey", "दुबे"), ("ojha", "ओझा"),
    ("desai", "देसाई"), ("kulkarni", "कुलकर्णी"), ("deshpande", "देशपांडे"), ("bhatt", "भट्ट"),
    ("iyer", "अय्यर"), ("iyengar", "अयंगर"), ("menon", "मेनन"), ("pillai", "पिल्लै"),
    ("das", "दास"), ("sen", "सेन"), ("ghosh", "घोष"), ("roy", "रॉय"), ("bose", "बोस"),
    ("chatterjee", "चटर्जी"), ("mukherjee", "मुखर्जी"), ("banerjee", "बनर्जी"),
    ("shastri", "शास्त्री"), ("sastri", "शास्त्री"), ("shashtri", "शास्त्री"),
    ("ray", "राय"), ("rai", "राय"), ("rao", "राव"), ("rао", "राव"),
    ("agarwal", "अग्रवाल"), ("aggarwal", "अग्रवाल"),
    # Given names, male
    ("rajesh", "राजेश"), ("ramesh", "रमेश"), ("suresh", "सुरेश"), ("mahesh", "महेश"),
    ("dinesh", "दिनेश"), ("ganesh", "गणेश"), ("prakash", "प्रकाश"),
    ("anil", "अनिल"), ("sunil", "सुनील"), ("manoj", "मनोज"), ("sanjay", "संजय"),
    ("vijay", "विजय"), ("ajay", "अजय"), ("jai", "जय"), ("jay", "जय"),
    ("amit", "अमित"), ("sumit", "सुमित"), ("rohit", "रोहित"), ("mohit", "मोहित"),
    ("ravi", "रवि"), ("kiran", "किरण"), ("deepak", "दीपक"), ("ashok", "अशोक"),
    ("narendra", "नरेंद्र"), ("devendra", "देवेंद्र"), ("rajendra", "राजेंद्र"),
    ("pradeep", "प्रदीप"), ("sandeep", "संदीप"), ("kuldeep", "कुलदीप"),
    ("rakesh", "राकेश"), ("mukesh", "मुकेश"), ("yogesh", "योगेश"),
    ("naresh", "नरेश"), ("hitesh", "हितेश"), ("jitesh", "जितेश"),
    ("satish", "सतीश"), ("girish", "गिरीश"), ("harish", "हरीश"),
    ("avinash", "अविनाश"), ("prakash", "प्रकाश"), ("subhash", "सुभाष"),
    ("manish", "मनीष"), ("tanish", "तनीष"),
    ("anand", "आनंद"), ("govind", "गोविंद"), ("arvind", "अरविंद"),
    ("shyam", "श्याम"), ("mohan", "मोहन"), ("sohan", "सोहन"), ("rohan", "रोहन"),
    ("pankaj", "पंकज"), ("neeraj", "नीरज"), ("dheeraj", "धीरज"),
    ("rahul", "राहुल"), ("atul", "अतुल"), ("vipul", "विपुल"),
    ("sachin", "सचिन"), ("tarun", "तरुण"), ("varun", "वरुण"), ("arjun", "अर्जुन"),
    ("vishal", "विशाल"), ("nitin", "नितिन"), ("nikhil", "निखिल"),
    ("akash", "आकाश"), ("vikas", "विकास"), ("neeraj", "नीरज"),
    ("abhishek", "अभिषेक"), ("rishikesh", "ऋषिकेश"), ("umesh", "उमेश"),
    ("lokesh", "लोकेश"), ("ramakrishna", "रामकृष्ण"), ("venkatesan", "वेंकटेसन"),
    ("sundar", "सुंदर"), ("ganpat", "गणपत"), ("bharat", "भरत"),
    ("dilip", "दिलीप"), ("shambu", "शंभु"), ("santosh", "संतोष"),
    ("manish", "मनीष"), ("ashish", "आशीष"), ("jagdish", "जगदीश"),
    ("ramchandra", "रामचंद्र"), ("balaji", "बालाजी"), ("srinivas", "श्रीनिवास"),
    ("kartikeya", "कार्तिकेय"), ("siddharth", "सिद्धार्थ"), ("gaurav", "गौरव"),
    ("harsh", "हर्ष"), ("yash", "यश"), ("aditya", "आदित्य"), ("aryan", "आर्यन"),
    ("chirag", "चिराग"), ("tushar", "तुषार"), ("shivam", "शिवम"), ("ankit", "अंकित"),
    # Given names, female
    ("priya", "प्रिया"), ("kavita", "कविता"), ("sunita", "सुनीता"),
    ("anita", "अनीता"), ("sangita", "संगीता"), ("mamta", "ममता"),
    ("rekha", "रेखा"), ("meena", "मीना"), ("seema", "सीमा"),
    ("poonam", "पूनम"), ("komal", "कोमल"), ("neha", "नेहा"),
    ("sneha", "स्नेहा"), ("radha", "राधा"), ("sita", "सीता"),
    ("geeta", "गीता"), ("maya", "माया"), ("asha", "आशा"),
    ("usha", "उषा"), ("nisha", "निशा"), ("disha", "दिशा"),
    ("pooja", "पूजा"), ("sapna", "सपना"), ("deepa", "दीपा"),
    ("ritu", "ऋतु"), ("renu", "रेनु"), ("manju", "मंजू"),
    ("shashi", "शशि"), ("jyoti", "ज्योति"), ("aarti", "आरती"),
    ("anjali", "अंजलि"), ("kavya", "काव्या"), ("divya", "दिव्या"),
    ("shreya", "श्रेया"), ("nikita", "निकिता"), ("ananya", "अनन्या"),
    ("sakshi", "साक्षी"), ("tanvi", "तन्वी"), ("swati", "स्वाति"),
    ("preeti", "प्रीति"), ("kalpana", "कल्पना"), ("vandana", "वंदना"),
    ("shalini", "शालिनी"), ("pallavi", "पल्लवी"), ("vidya", "विद्या"),
    ("archana", "अर्चना"), ("sadhana", "साधना"), ("vaishali", "वैशाली"),
    ("manisha", "मनीषा"), ("tanushree", "तनुश्री"), ("madhuri", "माधुरी"),
    ("aishwarya", "ऐश्वर्या"), ("sonali", "सोनाली"), ("kiran", "किरण"),
    ("meera", "मीरा"), ("alka", "अल्का"), ("anupama", "अनुपमा"),
    ("shilpa", "शिल्पा"), ("varsha", "वर्षा"), ("nandini", "नंदिनी"),
    # Religious / mythological
    ("krishna", "कृष्ण"), ("rama", "राम"), ("shiva", "शिव"), ("vishnu", "विष्णु"),
    ("hanuman", "हनुमान"), ("ganesh", "गणेश"), ("brahma", "ब्रह्मा"),
    ("lakshmi", "लक्ष्मी"), ("saraswati", "सरस्वती"), ("durga", "दुर्गा"),
    ("parvati", "पार्वती"), ("kali", "काली"), ("sita", "सीता"),
    # Cities
    ("delhi", "दिल्ली"), ("mumbai", "मुंबई"), ("kolkata", "कोलकाता"),
    ("chennai", "चेन्नई"), ("bangalore", "बेंगलुरु"), ("hyderabad", "हैदराबाद"),
    ("ahmedabad", "अहमदाबाद"), ("pune", "पुणे"), ("surat", "सूरत"),
    ("jaipur", "जयपुर"), ("lucknow", "लखनऊ"), ("kanpur", "कानपुर"),
    ("nagpur", "नागपुर"), ("indore", "इंदौर"), ("bhopal", "भोपाल"),
    ("patna", "पटना"), ("vadodara", "वडोदरा"), ("ludhiana", "लुधियाना"),
    ("agra", "आगरा"), ("nashik", "नासिक"), ("ranchi", "रांची"),
    ("varanasi", "वाराणसी"), ("amritsar", "अमृतसर"), ("allahabad", "इलाहाबाद"),
    ("prayagraj", "प्रयागराज"), ("meerut", "मेरठ"), ("rajkot", "राजकोट"),
    ("gwalior", "ग्वालियर"), ("vijayawada", "विजयवाड़ा"),
    # States
    ("maharashtra", "महाराष्ट्र"), ("gujarat", "गुजरात"), ("rajasthan", "राजस्थान"),
    ("punjab", "पंजाब"), ("haryana", "हरियाणा"), ("uttarpradesh", "उत्तरप्रदेश"),
    ("madhyapradesh", "मध्यप्रदेश"), ("bihar", "बिहार"), ("bengal", "बंगाल"),
    ("karnataka", "कर्नाटक"), ("tamilnadu", "तमिलनाडु"), ("kerala", "केरल"),
    ("odisha", "ओडिशा"), ("jharkhand", "झारखंड"), ("assam", "असम"),
    # Common words
    ("bharat", "भारत"), ("india", "इंडिया"), ("hindustan", "हिंदुस्तान"),
    ("namaste", "नमस्ते"), ("namaskar", "नमस्कार"), ("dhanyavad", "धन्यवाद"),
    ("shubh", "शुभ"), ("mangal", "मंगल"), ("nagar", "नगर"),
    ("vihar", "विहार"), ("niwas", "निवास"), ("marg", "मार्ग"),
    ("road", "रोड"), ("street", "स्ट्रीट"), ("colony", "कॉलोनी"),
    ("bazar", "बाजार"), ("market", "मार्केट"), ("shop", "शॉप"),
    ("mobile", "मोबाइल"), ("phone", "फोन"), ("computer", "कंप्यूटर"),
    # Address components
    ("house", "मकान"), ("flat", "फ्लैट"), ("apartment", "अपार्टमेंट"),
    ("building", "भवन"), ("tower", "टावर"), ("complex", "कॉम्प्लेक्स"),
    ("lane", "गली"), ("gali", "गली"), ("chowk", "चौक"),
    ("cross", "क्रॉस"), ("circle", "सर्कल"), ("sector", "सेक्टर"),
    ("phase", "फेज"), ("block", "ब्लॉक"), ("plot", "प्लॉट"),
    ("near", "के पास"), ("behind", "के पीछे"), ("opposite", "के सामने"),
    ("behind", "पीछे"), ("front", "सामने"), ("beside", "बगल में"),
    # Directions
    ("north", "उत्तर"), ("south", "दक्षिण"), ("east", "पूर्व"), ("west", "पश्चिम"),
    ("left", "बाएं"), ("right", "दाएं"), ("center", "केंद्र"),
    # Landmarks
    ("hospital", "अस्पताल"), ("school", "स्कूल"), ("college", "कॉलेज"),
    ("temple", "मंदिर"), ("mosque", "मस्जिद"), ("church", "चर्च"),
    ("station", "स्टेशन"), ("railway", "रेलवे"), ("bus", "बस"),
    ("metro", "मेट्रो"), ("airport", "हवाई अड्डा"), ("park", "पार्क"),
    ("garden", "बाग"), ("mall", "मॉल"), ("cinema", "सिनेमा"),
    ("hotel", "होटल"), ("restaurant", "रेस्टोरेंट"), ("bank", "बैंक"),
    ("office", "कार्यालय"), ("company", "कंपनी"), ("factory", "फैक्ट्री"),
    # Honorifics
    ("mr", "श्री"), ("mrs", "श्रीमती"), ("miss", "कुमारी"),
    ("shri", "श्री"), ("smt", "श्रीमती"), ("kumari", "कुमारी"),
    ("dr", "डॉ"), ("prof", "प्रो"), ("sir", "सर"), ("madam", "मैडम"),
    # Relations
    ("father", "पिता"), ("mother", "माता"), ("son", "पुत्र"), ("daughter", "पुत्री"),
    ("brother", "भाई"), ("sister", "बहन"), ("wife", "पत्नी"), ("husband", "पति"),
    # Adjectives
    ("new", "नया"), ("old", "पुराना"), ("big", "बड़ा"), ("small", "छोटा"),
    ("good", "अच्छा"), ("bad", "बुरा"), ("beautiful", "सुंदर"),
    # Numbers
    ("one", "एक"), ("two", "दो"), ("three", "तीन"), ("four", "चार"),
    ("five", "पांच"), ("six", "छह"), ("seven", "सात"), ("eight", "आठ"),
    ("nine", "नौ"), ("ten", "दस"), ("first", "पहला"), ("second", "दूसरा"),
    ("third", "तीसरा"), ("fourth", "चौथा"), ("fifth", "पांचवां"),
)

TYPO_ENTRIES: tuple[tuple[str, str], ...] = (
    # Names
    ("rajesh", "rajesh"), ("rajeah", "rajesh"), ("rajish", "rajesh"), ("rajessh", "rajesh"),
    ("krishna", "krishna"), ("krshna", "krishna"), ("krsna", "krishna"), ("krisna", "krishna"),
    ("vishnu", "vishnu"), ("visnu", "vishnu"), ("vshnu", "vishnu"),
    ("shiva", "shiva"), ("siva", "shiva"), ("shiv", "shiva"),
    ("kumar", "kumar"), ("kumer", "kumar"), ("kumr", "kumar"), ("kumarr", "kumar"),
    ("singh", "singh"), ("sing", "singh"), ("singhh", "singh"), ("sigh", "singh"),
    ("sharma", "sharma"), ("sharmaा", "sharma"), ("sharmaa", "sharma"), ("shrama", "sharma"),
    ("gupta", "gupta"), ("guptha", "gupta"), ("guptaa", "gupta"),
    ("verma", "verma"), ("varmaa", "verma"), ("varma", "verma"),
    ("patel", "patel"), ("patil", "patel"), ("patell", "patel"),
    ("avinash", "avinash"), ("avinsh", "avinash"), ("avinasha", "avinash"),
    ("rahul", "rahul"), ("raahul", "rahul"), ("rahull", "rahul"),
    ("rohit", "rohit"), ("roheet", "rohit"), ("rohitt", "rohit"),
    ("amit", "amit"), ("ameet", "amit"), ("amitt", "amit"),
    ("suresh", "suresh"), ("sureshh", "suresh"), ("shuresh", "suresh"),
    ("ramesh", "ramesh"), ("rameshh", "ramesh"), ("ramesha", "ramesh"),
    ("priya", "priya"), ("priyaa", "priya"), ("pria", "priya"),
    ("neha", "neha"), ("nehaa", "neha"), ("neaha", "neha"),
    # Cities
    ("delhi", "delhi"), ("dilli", "delhi"), ("dehli", "delhi"), ("deli", "delhi"),
    ("mumbai", "mumbai"), ("bombay", "mumbai"), ("mubai", "mumbai"), ("mumbay", "mumbai"),
    ("bangalore", "bangalore"), ("bengaluru", "bangalore"), ("banglore", "bangalore"),
    ("bangalor", "bangalore"),
    ("kolkata", "kolkata"), ("calcutta", "kolkata"), ("kolkatta", "kolkata"),
    ("chennai", "chennai"), ("madras", "chennai"), ("chenai", "chennai"),
    ("hyderabad", "hyderabad"), ("hydrabad", "hyderabad"), ("haidarabad", "hyderabad"),
    ("pune", "pune"), ("poona", "pune"), ("punee", "pune"),
    ("jaipur", "jaipur"), ("jaypur", "jaipur"), ("jaipurr", "jaipur"),
    # Address terms
    ("nagar", "nagar"), ("nagr", "nagar"), ("nagarr", "nagar"), ("ngr", "nagar"),
    ("road", "road"), ("raod", "road"), ("rooad", "road"),
    ("street", "street"), ("streat", "street"), ("strt", "street"),
    ("colony", "colony"), ("coloni", "colony"), ("collony", "colony"),
    ("market", "market"), ("markit", "market"), ("mrkt", "market"),
    ("gali", "gali"), ("galii", "gali"), ("galee", "gali"),
    # Phonetic variations
    ("charan", "charan"), ("charane", "charan"), ("charann", "charan"), ("chran", "charan"),
    ("mohan", "mohan"), ("mohann", "mohan"), ("mohn", "mohan"), ("mohana", "mohan"),
    ("raman", "raman"), ("ramana", "raman"), ("ramann", "raman"),
    ("kiran", "kiran"), ("kirann", "kiran"), ("kieran", "kiran"),
    # Doubled letters
    ("sunil", "sunil"), ("sunill", "sunil"), ("suneel", "sunil"),
    ("anil", "anil"), ("anill", "anil"), ("aneel", "anil"),
    ("geeta", "geeta"), ("gita", "geeta"), ("geetha", "geeta"),
    ("sita", "sita"), ("sitha", "sita"), ("sitaa", "sita"),
)
