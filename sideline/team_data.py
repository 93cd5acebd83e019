"""
Sideline Saga Team Catalog
==========================

Static identity data for the programs and franchises a career can pass
through.  Four levels: FBS Power (fbs-p5), FBS Group of Five (fbs-g5),
FCS, and the NFL.

Row layout:
    (team_id, name, nickname, level, conference, prestige,
     (primary, secondary), stadium, location, primary_rival,
     secondary_rivals, fanbase_passion, era_conferences)

``conference`` is the modern affiliation; ``era_conferences`` maps the first
year of each earlier affiliation to its conference.  NFL rows put the
division in the conference slot as "AFC East" etc.
"""

TEAM_ROWS = [
    # ── SEC ──
    ("alabama", "Alabama", "Crimson Tide", "fbs-p5", "SEC", 5, ("#9E1B32", "#FFFFFF"),
     "Bryant-Denny Stadium", "Tuscaloosa, AL", "auburn", ["tennessee", "lsu"], 98, {}),
    ("auburn", "Auburn", "Tigers", "fbs-p5", "SEC", 4, ("#0C2340", "#E87722"),
     "Jordan-Hare Stadium", "Auburn, AL", "alabama", ["georgia"], 92, {}),
    ("florida", "Florida", "Gators", "fbs-p5", "SEC", 5, ("#0021A5", "#FA4616"),
     "Ben Hill Griffin Stadium", "Gainesville, FL", "florida_state", ["georgia", "tennessee"], 93, {}),
    ("georgia", "Georgia", "Bulldogs", "fbs-p5", "SEC", 4, ("#BA0C2F", "#000000"),
     "Sanford Stadium", "Athens, GA", "florida", ["auburn", "georgia_tech"], 95, {}),
    ("lsu", "LSU", "Tigers", "fbs-p5", "SEC", 4, ("#461D7C", "#FDD023"),
     "Tiger Stadium", "Baton Rouge, LA", "alabama", ["ole_miss", "arkansas"], 96, {}),
    ("tennessee", "Tennessee", "Volunteers", "fbs-p5", "SEC", 4, ("#FF8200", "#FFFFFF"),
     "Neyland Stadium", "Knoxville, TN", "alabama", ["florida", "vanderbilt"], 94, {}),
    ("texas_am", "Texas A&M", "Aggies", "fbs-p5", "SEC", 3, ("#500000", "#FFFFFF"),
     "Kyle Field", "College Station, TX", "texas", ["lsu"], 90,
     {1995: "SWC", 1996: "Big 12", 2012: "SEC"}),
    ("ole_miss", "Ole Miss", "Rebels", "fbs-p5", "SEC", 3, ("#CE1126", "#14213D"),
     "Vaught-Hemingway Stadium", "Oxford, MS", "mississippi_state", ["lsu"], 80, {}),
    ("mississippi_state", "Mississippi State", "Bulldogs", "fbs-p5", "SEC", 2, ("#660000", "#FFFFFF"),
     "Davis Wade Stadium", "Starkville, MS", "ole_miss", [], 78, {}),
    ("arkansas", "Arkansas", "Razorbacks", "fbs-p5", "SEC", 3, ("#9D2235", "#FFFFFF"),
     "Razorback Stadium", "Fayetteville, AR", "lsu", ["texas"], 85, {}),
    ("vanderbilt", "Vanderbilt", "Commodores", "fbs-p5", "SEC", 1, ("#000000", "#CFAE70"),
     "Vanderbilt Stadium", "Nashville, TN", "tennessee", [], 45, {}),
    ("missouri", "Missouri", "Tigers", "fbs-p5", "SEC", 2, ("#F1B82D", "#000000"),
     "Faurot Field", "Columbia, MO", "kansas", ["arkansas"], 70,
     {1995: "Big 8", 1996: "Big 12", 2012: "SEC"}),

    # ── Big Ten ──
    ("ohio_state", "Ohio State", "Buckeyes", "fbs-p5", "Big Ten", 5, ("#BB0000", "#666666"),
     "Ohio Stadium", "Columbus, OH", "michigan", ["penn_state"], 97, {}),
    ("michigan", "Michigan", "Wolverines", "fbs-p5", "Big Ten", 5, ("#00274C", "#FFCB05"),
     "Michigan Stadium", "Ann Arbor, MI", "ohio_state", ["michigan_state", "notre_dame"], 96, {}),
    ("penn_state", "Penn State", "Nittany Lions", "fbs-p5", "Big Ten", 4, ("#041E42", "#FFFFFF"),
     "Beaver Stadium", "State College, PA", "ohio_state", ["pitt"], 93, {}),
    ("michigan_state", "Michigan State", "Spartans", "fbs-p5", "Big Ten", 3, ("#18453B", "#FFFFFF"),
     "Spartan Stadium", "East Lansing, MI", "michigan", [], 80, {}),
    ("wisconsin", "Wisconsin", "Badgers", "fbs-p5", "Big Ten", 3, ("#C5050C", "#FFFFFF"),
     "Camp Randall Stadium", "Madison, WI", "minnesota", ["iowa"], 84, {}),
    ("iowa", "Iowa", "Hawkeyes", "fbs-p5", "Big Ten", 3, ("#000000", "#FFCD00"),
     "Kinnick Stadium", "Iowa City, IA", "iowa_state", ["wisconsin"], 82, {}),
    ("nebraska", "Nebraska", "Cornhuskers", "fbs-p5", "Big Ten", 4, ("#E41C38", "#FDF2D9"),
     "Memorial Stadium", "Lincoln, NE", "oklahoma", ["iowa", "colorado"], 95,
     {1995: "Big 8", 1996: "Big 12", 2011: "Big Ten"}),
    ("minnesota", "Minnesota", "Golden Gophers", "fbs-p5", "Big Ten", 2, ("#7A0019", "#FFCC33"),
     "Huntington Bank Stadium", "Minneapolis, MN", "wisconsin", ["iowa"], 62, {}),
    ("purdue", "Purdue", "Boilermakers", "fbs-p5", "Big Ten", 2, ("#000000", "#CFB991"),
     "Ross-Ade Stadium", "West Lafayette, IN", "indiana", [], 60, {}),
    ("indiana", "Indiana", "Hoosiers", "fbs-p5", "Big Ten", 1, ("#990000", "#FFFFFF"),
     "Memorial Stadium", "Bloomington, IN", "purdue", [], 48, {}),
    ("usc", "USC", "Trojans", "fbs-p5", "Big Ten", 5, ("#990000", "#FFC72C"),
     "Los Angeles Memorial Coliseum", "Los Angeles, CA", "ucla", ["notre_dame"], 90,
     {1995: "Pac-10", 2011: "Pac-12", 2024: "Big Ten"}),
    ("ucla", "UCLA", "Bruins", "fbs-p5", "Big Ten", 3, ("#2D68C4", "#F2A900"),
     "Rose Bowl", "Los Angeles, CA", "usc", [], 72,
     {1995: "Pac-10", 2011: "Pac-12", 2024: "Big Ten"}),
    ("oregon", "Oregon", "Ducks", "fbs-p5", "Big Ten", 4, ("#154733", "#FEE123"),
     "Autzen Stadium", "Eugene, OR", "washington", ["oregon_state"], 88,
     {1995: "Pac-10", 2011: "Pac-12", 2024: "Big Ten"}),
    ("washington", "Washington", "Huskies", "fbs-p5", "Big Ten", 4, ("#4B2E83", "#B7A57A"),
     "Husky Stadium", "Seattle, WA", "oregon", ["washington_state"], 86,
     {1995: "Pac-10", 2011: "Pac-12", 2024: "Big Ten"}),

    # ── Big 12 ──
    ("texas", "Texas", "Longhorns", "fbs-p5", "SEC", 5, ("#BF5700", "#FFFFFF"),
     "Darrell K Royal Stadium", "Austin, TX", "oklahoma", ["texas_am", "arkansas"], 96,
     {1995: "SWC", 1996: "Big 12", 2024: "SEC"}),
    ("oklahoma", "Oklahoma", "Sooners", "fbs-p5", "SEC", 5, ("#841617", "#FDF9D8"),
     "Gaylord Family Oklahoma Memorial Stadium", "Norman, OK", "texas", ["oklahoma_state", "nebraska"], 95,
     {1995: "Big 8", 1996: "Big 12", 2024: "SEC"}),
    ("oklahoma_state", "Oklahoma State", "Cowboys", "fbs-p5", "Big 12", 3, ("#FF7300", "#000000"),
     "Boone Pickens Stadium", "Stillwater, OK", "oklahoma", [], 76,
     {1995: "Big 8", 1996: "Big 12"}),
    ("kansas_state", "Kansas State", "Wildcats", "fbs-p5", "Big 12", 3, ("#512888", "#FFFFFF"),
     "Bill Snyder Family Stadium", "Manhattan, KS", "kansas", [], 74,
     {1995: "Big 8", 1996: "Big 12"}),
    ("kansas", "Kansas", "Jayhawks", "fbs-p5", "Big 12", 1, ("#0051BA", "#E8000D"),
     "David Booth Memorial Stadium", "Lawrence, KS", "kansas_state", ["missouri"], 40,
     {1995: "Big 8", 1996: "Big 12"}),
    ("iowa_state", "Iowa State", "Cyclones", "fbs-p5", "Big 12", 2, ("#C8102E", "#F1BE48"),
     "Jack Trice Stadium", "Ames, IA", "iowa", [], 66,
     {1995: "Big 8", 1996: "Big 12"}),
    ("colorado", "Colorado", "Buffaloes", "fbs-p5", "Big 12", 3, ("#000000", "#CFB87C"),
     "Folsom Field", "Boulder, CO", "nebraska", ["utah"], 74,
     {1995: "Big 8", 1996: "Big 12", 2011: "Pac-12", 2024: "Big 12"}),
    ("tcu", "TCU", "Horned Frogs", "fbs-p5", "Big 12", 3, ("#4D1979", "#FFFFFF"),
     "Amon G. Carter Stadium", "Fort Worth, TX", "baylor", ["smu"], 70,
     {1995: "SWC", 1996: "WAC", 2001: "C-USA", 2005: "Mountain West", 2012: "Big 12"}),
    ("baylor", "Baylor", "Bears", "fbs-p5", "Big 12", 2, ("#154734", "#FFB81C"),
     "McLane Stadium", "Waco, TX", "tcu", ["texas"], 64,
     {1995: "SWC", 1996: "Big 12"}),
    ("utah", "Utah", "Utes", "fbs-p5", "Big 12", 3, ("#CC0000", "#FFFFFF"),
     "Rice-Eccles Stadium", "Salt Lake City, UT", "byu", ["colorado"], 76,
     {1995: "WAC", 1999: "Mountain West", 2011: "Pac-12", 2024: "Big 12"}),

    # ── ACC ──
    ("florida_state", "Florida State", "Seminoles", "fbs-p5", "ACC", 5, ("#782F40", "#CEB888"),
     "Doak Campbell Stadium", "Tallahassee, FL", "florida", ["miami", "clemson"], 94, {}),
    ("miami", "Miami", "Hurricanes", "fbs-p5", "ACC", 4, ("#005030", "#F47321"),
     "Hard Rock Stadium", "Miami Gardens, FL", "florida_state", ["florida"], 84,
     {1995: "Big East", 2004: "ACC"}),
    ("clemson", "Clemson", "Tigers", "fbs-p5", "ACC", 4, ("#F56600", "#522D80"),
     "Memorial Stadium", "Clemson, SC", "south_carolina", ["florida_state"], 90, {}),
    ("virginia_tech", "Virginia Tech", "Hokies", "fbs-p5", "ACC", 3, ("#630031", "#CF4420"),
     "Lane Stadium", "Blacksburg, VA", "virginia", ["miami"], 82,
     {1995: "Big East", 2004: "ACC"}),
    ("georgia_tech", "Georgia Tech", "Yellow Jackets", "fbs-p5", "ACC", 2, ("#B3A369", "#003057"),
     "Bobby Dodd Stadium", "Atlanta, GA", "georgia", [], 62, {}),
    ("louisville", "Louisville", "Cardinals", "fbs-p5", "ACC", 2, ("#AD0000", "#000000"),
     "L&N Stadium", "Louisville, KY", "kentucky", [], 68,
     {1995: "Independent", 1996: "C-USA", 2005: "Big East", 2013: "AAC", 2014: "ACC"}),
    ("duke", "Duke", "Blue Devils", "fbs-p5", "ACC", 1, ("#003087", "#FFFFFF"),
     "Wallace Wade Stadium", "Durham, NC", "north_carolina", [], 35, {}),
    ("north_carolina", "North Carolina", "Tar Heels", "fbs-p5", "ACC", 2, ("#7BAFD4", "#FFFFFF"),
     "Kenan Memorial Stadium", "Chapel Hill, NC", "duke", ["nc_state"], 60, {}),

    # ── Independent ──
    ("notre_dame", "Notre Dame", "Fighting Irish", "fbs-p5", "Independent", 5, ("#0C2340", "#C99700"),
     "Notre Dame Stadium", "South Bend, IN", "usc", ["michigan"], 95, {}),

    # ── Group of Five ──
    ("boise_state", "Boise State", "Broncos", "fbs-g5", "Mountain West", 3, ("#0033A0", "#D64309"),
     "Albertsons Stadium", "Boise, ID", "fresno_state", [], 80,
     {1996: "Big West", 2001: "WAC", 2011: "Mountain West"}),
    ("fresno_state", "Fresno State", "Bulldogs", "fbs-g5", "Mountain West", 2, ("#DB0032", "#002E6D"),
     "Valley Children's Stadium", "Fresno, CA", "boise_state", [], 66,
     {1995: "WAC", 2012: "Mountain West"}),
    ("byu", "BYU", "Cougars", "fbs-g5", "Independent", 3, ("#002E5D", "#FFFFFF"),
     "LaVell Edwards Stadium", "Provo, UT", "utah", [], 78,
     {1995: "WAC", 1999: "Mountain West", 2011: "Independent"}),
    ("ucf", "UCF", "Knights", "fbs-g5", "AAC", 2, ("#000000", "#BA9B37"),
     "FBC Mortgage Stadium", "Orlando, FL", "usf", [], 68,
     {1996: "Independent", 2002: "MAC", 2005: "C-USA", 2013: "AAC"}),
    ("usf", "South Florida", "Bulls", "fbs-g5", "AAC", 2, ("#006747", "#CFC493"),
     "Raymond James Stadium", "Tampa, FL", "ucf", [], 55,
     {1997: "Independent", 2003: "C-USA", 2005: "Big East", 2013: "AAC"}),
    ("houston", "Houston", "Cougars", "fbs-g5", "AAC", 2, ("#C8102E", "#FFFFFF"),
     "TDECU Stadium", "Houston, TX", "rice", [], 60,
     {1995: "SWC", 1996: "C-USA", 2013: "AAC"}),
    ("memphis", "Memphis", "Tigers", "fbs-g5", "AAC", 2, ("#003087", "#898D8D"),
     "Simmons Bank Liberty Stadium", "Memphis, TN", "ucf", [], 58,
     {1995: "Independent", 1996: "C-USA", 2013: "AAC"}),
    ("smu", "SMU", "Mustangs", "fbs-g5", "AAC", 2, ("#0033A0", "#C8102E"),
     "Gerald J. Ford Stadium", "Dallas, TX", "tcu", [], 52,
     {1995: "SWC", 1996: "WAC", 2005: "C-USA", 2013: "AAC"}),
    ("rice", "Rice", "Owls", "fbs-g5", "C-USA", 1, ("#00205B", "#C1C6C8"),
     "Rice Stadium", "Houston, TX", "houston", [], 30,
     {1995: "SWC", 1996: "WAC", 2005: "C-USA", 2023: "AAC"}),
    ("marshall", "Marshall", "Thundering Herd", "fbs-g5", "Sun Belt", 2, ("#00B140", "#FFFFFF"),
     "Joan C. Edwards Stadium", "Huntington, WV", "ohio", [], 62,
     {1997: "MAC", 2005: "C-USA", 2022: "Sun Belt"}),
    ("appalachian_state", "Appalachian State", "Mountaineers", "fbs-g5", "Sun Belt", 2, ("#000000", "#FFCC00"),
     "Kidd Brewer Stadium", "Boone, NC", "georgia_southern", [], 70,
     {1995: "Southern", 2014: "Sun Belt"}),
    ("georgia_southern", "Georgia Southern", "Eagles", "fbs-g5", "Sun Belt", 1, ("#011E41", "#A3AAAE"),
     "Paulson Stadium", "Statesboro, GA", "appalachian_state", [], 55,
     {1995: "Southern", 2014: "Sun Belt"}),
    ("toledo", "Toledo", "Rockets", "fbs-g5", "MAC", 2, ("#15397F", "#FFDA00"),
     "Glass Bowl", "Toledo, OH", "bowling_green", [], 50, {}),
    ("bowling_green", "Bowling Green", "Falcons", "fbs-g5", "MAC", 1, ("#FE5000", "#4F2C1D"),
     "Doyt Perry Stadium", "Bowling Green, OH", "toledo", [], 42, {}),
    ("ohio", "Ohio", "Bobcats", "fbs-g5", "MAC", 1, ("#00694E", "#FFFFFF"),
     "Peden Stadium", "Athens, OH", "marshall", [], 40, {}),
    ("hawaii", "Hawaii", "Rainbow Warriors", "fbs-g5", "Mountain West", 1, ("#024731", "#FFFFFF"),
     "Aloha Stadium", "Honolulu, HI", "fresno_state", [], 58,
     {1995: "WAC", 2012: "Mountain West"}),

    # ── FCS ──
    ("montana", "Montana", "Grizzlies", "fcs", "Big Sky", 2, ("#70002E", "#999999"),
     "Washington-Grizzly Stadium", "Missoula, MT", "montana_state", [], 72, {}),
    ("montana_state", "Montana State", "Bobcats", "fcs", "Big Sky", 2, ("#003875", "#B9975B"),
     "Bobcat Stadium", "Bozeman, MT", "montana", [], 64, {}),
    ("eastern_washington", "Eastern Washington", "Eagles", "fcs", "Big Sky", 1, ("#A10022", "#000000"),
     "Roos Field", "Cheney, WA", "montana", [], 45, {}),
    ("north_dakota_state", "North Dakota State", "Bison", "fcs", "Missouri Valley", 2, ("#0A5640", "#FFC72A"),
     "Fargodome", "Fargo, ND", "south_dakota_state", [], 70,
     {1995: "Division II", 2004: "Independent", 2008: "Missouri Valley"}),
    ("south_dakota_state", "South Dakota State", "Jackrabbits", "fcs", "Missouri Valley", 1, ("#0033A0", "#FFD100"),
     "Dana J. Dykhouse Stadium", "Brookings, SD", "north_dakota_state", [], 50,
     {1995: "Division II", 2004: "Independent", 2008: "Missouri Valley"}),
    ("youngstown_state", "Youngstown State", "Penguins", "fcs", "Missouri Valley", 2, ("#C8102E", "#FFFFFF"),
     "Stambaugh Stadium", "Youngstown, OH", "northern_iowa", [], 55, {1995: "Gateway", 2008: "Missouri Valley"}),
    ("northern_iowa", "Northern Iowa", "Panthers", "fcs", "Missouri Valley", 1, ("#4B116F", "#FFCC00"),
     "UNI-Dome", "Cedar Falls, IA", "youngstown_state", [], 45, {1995: "Gateway", 2008: "Missouri Valley"}),
    ("delaware", "Delaware", "Blue Hens", "fcs", "CAA", 2, ("#00539F", "#FFD200"),
     "Delaware Stadium", "Newark, DE", "villanova", [], 58, {1995: "Yankee", 2007: "CAA"}),
    ("villanova", "Villanova", "Wildcats", "fcs", "CAA", 1, ("#00205B", "#13B5EA"),
     "Villanova Stadium", "Villanova, PA", "delaware", [], 40, {1995: "Yankee", 2007: "CAA"}),
    ("richmond", "Richmond", "Spiders", "fcs", "CAA", 1, ("#990000", "#000066"),
     "E. Claiborne Robins Stadium", "Richmond, VA", "william_mary", [], 38, {1995: "Yankee", 2007: "CAA"}),
    ("furman", "Furman", "Paladins", "fcs", "Southern", 1, ("#582C83", "#FFFFFF"),
     "Paladin Stadium", "Greenville, SC", "wofford", [], 35, {}),
    ("chattanooga", "Chattanooga", "Mocs", "fcs", "Southern", 1, ("#00386B", "#E0AA0F"),
     "Finley Stadium", "Chattanooga, TN", "furman", [], 36, {}),
    ("jackson_state", "Jackson State", "Tigers", "fcs", "SWAC", 2, ("#002147", "#FFFFFF"),
     "Mississippi Veterans Memorial Stadium", "Jackson, MS", "grambling", [], 75, {}),
    ("grambling", "Grambling State", "Tigers", "fcs", "SWAC", 1, ("#000000", "#FFD700"),
     "Eddie G. Robinson Memorial Stadium", "Grambling, LA", "southern", [], 70, {}),
    ("howard", "Howard", "Bison", "fcs", "MEAC", 1, ("#003A63", "#E51937"),
     "William H. Greene Stadium", "Washington, DC", "hampton", [], 40, {}),
    ("harvard", "Harvard", "Crimson", "fcs", "Ivy", 1, ("#A51C30", "#FFFFFF"),
     "Harvard Stadium", "Boston, MA", "yale", [], 30, {}),
    ("yale", "Yale", "Bulldogs", "fcs", "Ivy", 1, ("#00356B", "#FFFFFF"),
     "Yale Bowl", "New Haven, CT", "harvard", [], 30, {}),
    ("lehigh", "Lehigh", "Mountain Hawks", "fcs", "Patriot", 1, ("#653819", "#FFFFFF"),
     "Goodman Stadium", "Bethlehem, PA", "lafayette", [], 28, {}),
    ("sam_houston", "Sam Houston", "Bearkats", "fcs", "Southland", 1, ("#F76902", "#FFFFFF"),
     "Bowers Stadium", "Huntsville, TX", "stephen_f_austin", [], 40, {}),

    # ── NFL ──
    ("dallas", "Dallas", "Cowboys", "nfl", "NFC East", 5, ("#003594", "#869397"),
     "Texas Stadium", "Irving, TX", "ny_giants", ["philadelphia"], 96, {}),
    ("ny_giants", "New York", "Giants", "nfl", "NFC East", 4, ("#0B2265", "#A71930"),
     "Giants Stadium", "East Rutherford, NJ", "dallas", ["philadelphia"], 88, {}),
    ("philadelphia", "Philadelphia", "Eagles", "nfl", "NFC East", 4, ("#004C54", "#A5ACAF"),
     "Veterans Stadium", "Philadelphia, PA", "dallas", ["ny_giants"], 92, {}),
    ("green_bay", "Green Bay", "Packers", "nfl", "NFC North", 5, ("#203731", "#FFB612"),
     "Lambeau Field", "Green Bay, WI", "chicago", ["minnesota_vikings"], 97, {1995: "NFC Central", 2002: "NFC North"}),
    ("chicago", "Chicago", "Bears", "nfl", "NFC North", 3, ("#0B162A", "#C83803"),
     "Soldier Field", "Chicago, IL", "green_bay", [], 88, {1995: "NFC Central", 2002: "NFC North"}),
    ("detroit", "Detroit", "Lions", "nfl", "NFC North", 2, ("#0076B6", "#B0B7BC"),
     "Pontiac Silverdome", "Pontiac, MI", "green_bay", ["chicago"], 76, {1995: "NFC Central", 2002: "NFC North"}),
    ("san_francisco", "San Francisco", "49ers", "nfl", "NFC West", 5, ("#AA0000", "#B3995D"),
     "Candlestick Park", "San Francisco, CA", "dallas", [], 90, {}),
    ("new_england", "New England", "Patriots", "nfl", "AFC East", 4, ("#002244", "#C60C30"),
     "Foxboro Stadium", "Foxborough, MA", "miami_dolphins", ["ny_jets"], 88, {}),
    ("miami_dolphins", "Miami", "Dolphins", "nfl", "AFC East", 3, ("#008E97", "#FC4C02"),
     "Joe Robbie Stadium", "Miami Gardens, FL", "new_england", [], 80, {}),
    ("pittsburgh", "Pittsburgh", "Steelers", "nfl", "AFC North", 5, ("#FFB612", "#101820"),
     "Three Rivers Stadium", "Pittsburgh, PA", "baltimore", [], 95, {1995: "AFC Central", 2002: "AFC North"}),
    ("kansas_city", "Kansas City", "Chiefs", "nfl", "AFC West", 4, ("#E31837", "#FFB81C"),
     "Arrowhead Stadium", "Kansas City, MO", "denver", ["las_vegas"], 92, {}),
    ("denver", "Denver", "Broncos", "nfl", "AFC West", 4, ("#FB4F14", "#002244"),
     "Mile High Stadium", "Denver, CO", "kansas_city", [], 90, {}),
    ("jacksonville", "Jacksonville", "Jaguars", "nfl", "AFC South", 2, ("#006778", "#D7A22A"),
     "Jacksonville Municipal Stadium", "Jacksonville, FL", "tennessee_titans", [], 62, {1995: "AFC Central", 2002: "AFC South"}),
]
