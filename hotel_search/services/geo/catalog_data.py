"""
Static geography table: continents and countries/territories.

Each country row is `(code, name_cn, name_en, continent_key, aliases_en, aliases_cn)`.
Aliases are curated so that no two rows share a normalized key; see
`tests/test_geography.py::TestCatalogIntegrity`.
"""

from __future__ import annotations

from typing import Dict, Tuple

ContinentRow = Tuple[str, str, str, Tuple[str, ...]]
CountryRow = Tuple[str, str, str, str, Tuple[str, ...], Tuple[str, ...]]

CATALOG_VERSION = "2024.1"

CONTINENT_ROWS: Tuple[ContinentRow, ...] = (
    ("ASIA", "亚洲", "Asia", ("Asian",)),
    ("EUROPE", "欧洲", "Europe", ("European",)),
    ("AFRICA", "非洲", "Africa", ("African",)),
    ("NORTH_AMERICA", "北美洲", "North America", ("North American", "Northern America", "N America")),
    ("SOUTH_AMERICA", "南美洲", "South America", ("South American", "Southern America", "S America", "Latin America")),
    ("OCEANIA", "大洋洲", "Oceania", ("Oceanic", "Australia and Oceania", "Pacific")),
    ("ANTARCTICA", "南极洲", "Antarctica", ("Antarctic",)),
)

# Retired or non-ISO codes still sent by some providers
LEGACY_CODES: Dict[str, str] = {
    "UK": "GB",
    "XM": "SX",
}

COUNTRY_ROWS: Tuple[CountryRow, ...] = (
    # ---- Asia ----
    ("CN", "中国", "China", "ASIA", ("china", "chinese", "PRC", "People's Republic of China", "Mainland China"), ("中国大陆", "中华人民共和国")),
    ("HK", "中国香港特区", "Hong Kong", "ASIA", ("HongKong", "Hong Kong SAR, China", "Hong Kong SAR"), ("香港", "中国香港")),
    ("MO", "中国澳门特区", "Macau", "ASIA", ("Macao", "Macau SAR, China", "Macau SAR", "Macao SAR"), ("澳门", "中国澳门")),
    ("TW", "中国台湾省", "Taiwan", "ASIA", ("Taiwan Province", "Taiwan, China", "Taiwan (R.O.C.)", "R.O.C."), ("台湾", "中国台湾")),
    ("JP", "日本", "Japan", "ASIA", (), ()),
    ("KR", "韩国", "South Korea", "ASIA", ("Korea", "Republic of Korea", "Korea, Republic of"), ("南韩",)),
    ("KP", "朝鲜", "North Korea", "ASIA", ("Democratic People's Republic of Korea", "DPRK"), ("北韩",)),
    ("SG", "新加坡", "Singapore", "ASIA", (), ()),
    ("MY", "马来西亚", "Malaysia", "ASIA", (), ()),
    ("TH", "泰国", "Thailand", "ASIA", (), ()),
    ("VN", "越南", "Vietnam", "ASIA", ("Viet Nam",), ()),
    ("PH", "菲律宾", "Philippines", "ASIA", (), ()),
    ("ID", "印度尼西亚", "Indonesia", "ASIA", (), ("印尼",)),
    ("BN", "文莱布鲁萨兰", "Brunei Darussalam", "ASIA", ("Brunei",), ("文莱",)),
    ("KH", "柬埔寨", "Cambodia", "ASIA", (), ()),
    ("LA", "老挝", "Laos", "ASIA", ("Lao People's Democratic Republic", "Lao PDR"), ()),
    ("MM", "缅甸", "Republic of the Union of Myanmar", "ASIA", ("Myanmar", "Burma"), ()),
    ("TL", "东帝汶", "East Timor", "ASIA", ("Timor-Leste",), ()),
    ("IN", "印度", "India", "ASIA", (), ()),
    ("PK", "巴基斯坦", "Pakistan", "ASIA", (), ()),
    ("BD", "孟加拉", "Bangladesh", "ASIA", (), ("孟加拉国",)),
    ("LK", "斯里兰卡", "Sri Lanka", "ASIA", (), ()),
    ("NP", "尼泊尔", "Nepal", "ASIA", (), ()),
    ("BT", "不丹", "Bhutan", "ASIA", (), ()),
    ("MV", "马尔代夫", "Maldives", "ASIA", (), ()),
    ("AF", "阿富汗", "Afghanistan", "ASIA", (), ()),
    ("IR", "伊朗", "Islamic Republic of Iran", "ASIA", ("Iran",), ()),
    ("IQ", "伊拉克", "Iraq", "ASIA", (), ()),
    ("SY", "叙利亚", "The Syrian Arab Republic", "ASIA", ("Syria",), ()),
    ("JO", "约旦", "Jordan", "ASIA", (), ()),
    ("LB", "黎巴嫩", "Lebanon", "ASIA", (), ()),
    ("PS", "巴勒斯坦", "Palestine", "ASIA", ("State of Palestine", "Palestinian Territories"), ()),
    ("IL", "以色列", "Israel", "ASIA", (), ()),
    ("SA", "沙特阿拉伯", "Saudi Arabia", "ASIA", (), ("沙特",)),
    ("AE", "阿联酋", "United Arab Emirates", "ASIA", ("UAE", "U.A.E."), ("阿拉伯联合酋长国",)),
    ("KW", "科威特", "Kuwait", "ASIA", (), ()),
    ("BH", "巴林", "Bahrain", "ASIA", (), ()),
    ("QA", "卡塔尔", "Qatar", "ASIA", (), ()),
    ("OM", "阿曼", "Oman", "ASIA", (), ()),
    ("YE", "也门", "Yemen", "ASIA", (), ()),
    ("TR", "土耳其", "Turkey", "ASIA", ("Türkiye", "Turkiye"), ()),
    ("GE", "格鲁吉亚", "Georgia", "ASIA", (), ()),
    ("AM", "亚美尼亚", "Armenia", "ASIA", (), ()),
    ("AZ", "阿塞拜疆", "Azerbaijan Republic", "ASIA", ("Azerbaijan",), ()),
    ("KZ", "哈萨克斯坦", "Kazakhstan", "ASIA", (), ()),
    ("UZ", "乌兹别克斯坦", "Uzbekistan", "ASIA", (), ()),
    ("TM", "土库曼斯坦", "Turkmenistan", "ASIA", (), ()),
    ("KG", "吉尔吉斯斯坦", "Kyrgyzstan", "ASIA", (), ()),
    ("TJ", "塔吉克斯坦", "Tajikistan", "ASIA", (), ()),
    ("MN", "蒙古", "Mongolia", "ASIA", (), ("蒙古国",)),
    ("XK", "加罗林群岛", "Caroline Islands", "ASIA", (), ()),
    # ---- Europe ----
    ("GB", "英国", "United Kingdom", "EUROPE", ("UK", "U.K.", "Britain", "Great Britain"), ("大不列颠",)),
    ("FR", "法国", "France", "EUROPE", (), ()),
    ("DE", "德国", "Germany", "EUROPE", (), ()),
    ("IT", "意大利", "Italy", "EUROPE", (), ()),
    ("ES", "西班牙", "Spain", "EUROPE", (), ()),
    ("PT", "葡萄牙", "Portugal", "EUROPE", (), ()),
    ("NL", "荷兰", "Netherlands", "EUROPE", ("Holland",), ()),
    ("BE", "比利时", "Belgium", "EUROPE", (), ()),
    ("LU", "卢森堡", "Luxembourg", "EUROPE", (), ()),
    ("CH", "瑞士", "Switzerland", "EUROPE", (), ()),
    ("AT", "奥地利", "Austria", "EUROPE", (), ()),
    ("GR", "希腊", "Greece", "EUROPE", (), ()),
    ("NO", "挪威", "Norway", "EUROPE", (), ()),
    ("SE", "瑞典", "Sweden", "EUROPE", (), ()),
    ("FI", "芬兰", "Finland", "EUROPE", (), ()),
    ("DK", "丹麦", "Denmark", "EUROPE", (), ()),
    ("IS", "冰岛", "Iceland", "EUROPE", (), ()),
    ("IE", "爱尔兰", "Ireland", "EUROPE", (), ()),
    ("PL", "波兰", "Poland", "EUROPE", (), ()),
    ("CZ", "捷克", "Czech Republic", "EUROPE", ("Czechia",), ()),
    ("SK", "斯洛伐克", "Slovakia", "EUROPE", (), ()),
    ("HU", "匈牙利", "Hungary", "EUROPE", (), ()),
    ("RO", "罗马尼亚", "Romania", "EUROPE", (), ()),
    ("BG", "保加利亚", "Bulgaria", "EUROPE", (), ()),
    ("SI", "斯洛文尼亚", "Slovenia", "EUROPE", (), ()),
    ("HR", "克罗地亚", "Croatia", "EUROPE", (), ()),
    ("BA", "波黑", "Bosnia and Herzegovina", "EUROPE", (), ("波斯尼亚和黑塞哥维那",)),
    ("RS", "塞尔维亚", "Serbia", "EUROPE", (), ()),
    ("ME", "黑山共和国", "Montenegro", "EUROPE", (), ("黑山",)),
    ("YK", "科索沃", "Kosovo", "EUROPE", (), ()),
    ("MK", "马其顿", "Macedonia", "EUROPE", ("North Macedonia",), ("北马其顿",)),
    ("AL", "阿尔巴尼亚", "Albania", "EUROPE", (), ()),
    ("LT", "立陶宛", "Lithuania", "EUROPE", (), ()),
    ("LV", "拉脱维亚", "Latvia", "EUROPE", (), ()),
    ("EE", "爱沙尼亚", "Estonia", "EUROPE", (), ()),
    ("BY", "白俄罗斯", "Belarus", "EUROPE", (), ()),
    ("UA", "乌克兰", "Ukraine", "EUROPE", (), ()),
    ("MD", "摩尔多瓦", "Moldova", "EUROPE", ("Republic of Moldova",), ()),
    ("RU", "俄罗斯", "Russian Federation", "EUROPE", ("Russia",), ("俄罗斯联邦",)),
    ("MT", "马耳他", "Malta", "EUROPE", (), ()),
    ("MC", "摩纳哥", "Monaco", "EUROPE", (), ()),
    ("SM", "圣马力诺", "San Marino", "EUROPE", (), ()),
    ("VA", "梵蒂冈", "Vatican City State", "EUROPE", ("Vatican", "Holy See"), ()),
    ("LI", "列支顿士登", "Liechtenstein", "EUROPE", (), ("列支敦士登",)),
    ("AD", "安道尔", "Andorra", "EUROPE", (), ()),
    ("FO", "法罗群岛", "Faroe Islands", "EUROPE", (), ()),
    ("GI", "直布罗陀", "Gibraltar", "EUROPE", (), ()),
    ("GG", "根西岛", "Guernsey", "EUROPE", (), ()),
    ("JE", "泽西岛", "Jersey", "EUROPE", (), ()),
    ("IM", "马恩岛", "Isle of Man", "EUROPE", (), ()),
    ("AX", "奥兰群岛", "Aland Islands", "EUROPE", ("Åland Islands",), ()),
    ("SJ", "斯瓦尔巴群岛和扬马延岛", "Svalbard and Jan Mayen", "EUROPE", (), ()),
    ("TF", "法属南部领地", "French Southern Territories", "EUROPE", (), ()),
    ("XJ", "巴利阿里群岛", "Balearic Islands", "EUROPE", (), ()),
    ("XH", "亚速尔群岛", "Azores", "EUROPE", (), ()),
    ("XF", "科西嘉岛", "Corsica", "EUROPE", (), ()),
    ("SX", "荷属圣马丁", "Sint Maarten", "EUROPE", ("SintMaarten",), ()),
    ("CY", "塞浦路斯", "Cyprus", "EUROPE", (), ("塞普路斯",)),
    # ---- North America ----
    ("US", "美国", "United States", "NORTH_AMERICA", ("USA", "U.S.A.", "United States of America", "America"), ("美利坚合众国",)),
    ("CA", "加拿大", "Canada", "NORTH_AMERICA", (), ()),
    ("MX", "墨西哥", "Mexico", "NORTH_AMERICA", (), ()),
    ("CU", "古巴", "The Republic of Cuba", "NORTH_AMERICA", ("Cuba",), ()),
    ("PA", "巴拿马", "Panama", "NORTH_AMERICA", (), ()),
    ("CR", "哥斯达黎加", "Costa Rica", "NORTH_AMERICA", (), ()),
    ("NI", "尼加拉瓜", "Nicaragua", "NORTH_AMERICA", (), ()),
    ("HN", "洪都拉斯", "Honduras", "NORTH_AMERICA", (), ()),
    ("SV", "萨尔瓦多", "El Salvador", "NORTH_AMERICA", (), ()),
    ("GT", "危地马拉", "Guatemala", "NORTH_AMERICA", (), ()),
    ("BZ", "伯里兹", "Belize", "NORTH_AMERICA", (), ("伯利兹",)),
    ("HT", "海地", "Haiti", "NORTH_AMERICA", (), ()),
    ("DO", "多米尼加共和国", "Dominican Republic", "NORTH_AMERICA", (), ("多米尼加",)),
    ("JM", "牙买加", "Jamaica", "NORTH_AMERICA", (), ()),
    ("TT", "特立尼达和多巴哥", "Trinidad and Tobago", "NORTH_AMERICA", (), ()),
    ("BS", "巴哈马", "Bahamas", "NORTH_AMERICA", ("The Bahamas",), ()),
    ("BB", "巴巴多斯", "Barbados", "NORTH_AMERICA", (), ()),
    ("GD", "格林纳达", "Grenada", "NORTH_AMERICA", (), ()),
    ("LC", "圣卢西亚", "Saint Lucia", "NORTH_AMERICA", ("St Lucia",), ()),
    ("VC", "圣文森特和格陵纳丁斯", "Saint Vincent and the Grenadines", "NORTH_AMERICA", (), ()),
    ("KN", "圣基茨和尼维斯", "Saint Kitts-Nevis", "NORTH_AMERICA", ("Saint Kitts and Nevis",), ()),
    ("AG", "安提瓜和巴布达", "Antigua and Barbuda", "NORTH_AMERICA", (), ()),
    ("DM", "多米尼克", "Dominica", "NORTH_AMERICA", (), ()),
    ("PR", "波多黎各", "Puerto Rico", "NORTH_AMERICA", (), ()),
    ("VI", "美属维尔京群岛", "Virgin Islands U.S.", "NORTH_AMERICA", ("US Virgin Islands",), ()),
    ("VG", "英属维尔京群岛", "British Virgin Islands", "NORTH_AMERICA", (), ()),
    ("AI", "安圭拉岛", "Anguilla", "NORTH_AMERICA", (), ()),
    ("MS", "蒙塞拉特岛", "Montserrat", "NORTH_AMERICA", (), ()),
    ("KY", "开曼群岛", "Cayman Islands", "NORTH_AMERICA", (), ()),
    ("TC", "特克斯和凯科斯群岛", "Turks and Caicos Islands", "NORTH_AMERICA", (), ()),
    ("BM", "百慕大", "Bermuda", "NORTH_AMERICA", (), ()),
    ("GL", "格陵兰岛", "Greenland", "NORTH_AMERICA", (), ()),
    ("PM", "圣皮埃尔和密克隆岛", "Saint Pierre and Miquelon", "NORTH_AMERICA", (), ()),
    ("AW", "阿鲁巴", "Aruba", "NORTH_AMERICA", (), ()),
    ("CW", "库拉索", "Curacao", "NORTH_AMERICA", ("Curaçao",), ()),
    ("AN", "荷属安德列斯", "Netherlands Antilles", "NORTH_AMERICA", (), ()),
    ("GP", "法属德洛普群岛", "Guadeloupe", "NORTH_AMERICA", (), ()),
    ("MQ", "法属马提尼克群岛", "Martinique", "NORTH_AMERICA", (), ()),
    ("MF", "法属圣马丁", "Saint-Martin", "NORTH_AMERICA", ("Saint Martin",), ()),
    ("UM", "美国外围岛屿", "United States Minor Outlying Islands", "NORTH_AMERICA", (), ()),
    ("HW", "夏威夷", "Hawaii", "NORTH_AMERICA", (), ()),
    ("AK", "阿拉斯加", "Alaska", "NORTH_AMERICA", (), ()),
    ("BQ", "博奈尔岛", "Bonaire", "NORTH_AMERICA", (), ()),
    ("XE", "圣尤斯特歇斯岛", "Saint Eustatius", "NORTH_AMERICA", (), ()),
    ("XN", "尼维斯岛", "Nevis", "NORTH_AMERICA", (), ()),
    # ---- South America ----
    ("BR", "巴西", "Brazil", "SOUTH_AMERICA", ("Brasil",), ()),
    ("AR", "阿根廷", "Argentina", "SOUTH_AMERICA", (), ()),
    ("CL", "智利", "Chile", "SOUTH_AMERICA", (), ()),
    ("CO", "哥伦比亚", "Colombia", "SOUTH_AMERICA", (), ()),
    ("VE", "委内瑞拉", "Venezuela", "SOUTH_AMERICA", (), ()),
    ("PE", "秘鲁", "Peru", "SOUTH_AMERICA", (), ()),
    ("EC", "厄瓜多尔", "Ecuador", "SOUTH_AMERICA", (), ()),
    ("BO", "玻利维亚", "Bolivia", "SOUTH_AMERICA", (), ()),
    ("PY", "巴拉圭", "Paraguay", "SOUTH_AMERICA", (), ()),
    ("UY", "乌拉圭", "Uruguay", "SOUTH_AMERICA", (), ()),
    ("GY", "圭亚那", "Guyana", "SOUTH_AMERICA", (), ()),
    ("SR", "苏里南", "Suriname", "SOUTH_AMERICA", (), ()),
    ("GF", "法属圭亚那", "French Guiana", "SOUTH_AMERICA", (), ()),
    ("FK", "福克兰群岛", "Falkland Islands", "SOUTH_AMERICA", (), ()),
    ("GS", "南乔治亚岛和南桑威奇群岛", "South Georgia and The South Sandwich Islands", "SOUTH_AMERICA", (), ()),
    ("BL", "圣巴托洛缪岛", "Saint-Barthélemy", "SOUTH_AMERICA", ("St Barts",), ()),
    # ---- Africa ----
    ("EG", "埃及", "Egypt", "AFRICA", (), ()),
    ("ZA", "南非", "South Africa", "AFRICA", (), ()),
    ("NG", "尼日利亚", "Nigeria", "AFRICA", (), ()),
    ("ET", "埃塞俄比亚", "Ethiopia", "AFRICA", (), ()),
    ("KE", "肯尼亚", "Kenya", "AFRICA", (), ()),
    ("TZ", "坦桑尼亚", "Tanzania", "AFRICA", ("United Republic of Tanzania",), ()),
    ("UG", "乌干达", "Uganda", "AFRICA", (), ()),
    ("DZ", "阿尔及利亚", "Algeria", "AFRICA", (), ()),
    ("MA", "摩洛哥", "Morocco", "AFRICA", (), ()),
    ("TN", "突尼斯", "Tunisia", "AFRICA", (), ()),
    ("LY", "利比亚", "Libya", "AFRICA", (), ()),
    ("SD", "苏丹", "Sudan", "AFRICA", (), ()),
    ("SS", "南苏丹", "South Sudan", "AFRICA", (), ()),
    ("SO", "索马里", "Somalia", "AFRICA", (), ()),
    ("DJ", "吉布提", "Djibouti", "AFRICA", (), ()),
    ("ER", "厄立特里亚", "Eritrea", "AFRICA", (), ()),
    ("GH", "加纳", "Ghana", "AFRICA", (), ()),
    ("CI", "科特迪瓦", "Ivory Coast", "AFRICA", ("Côte d'Ivoire",), ()),
    ("SN", "塞内加尔", "Senegal", "AFRICA", (), ()),
    ("ML", "马里", "Mali", "AFRICA", (), ()),
    ("BF", "布基纳法索", "Burkina Faso", "AFRICA", (), ()),
    ("NE", "尼日尔", "Niger", "AFRICA", (), ()),
    ("TD", "乍得", "Chad", "AFRICA", (), ()),
    ("CM", "喀麦隆", "Cameroon", "AFRICA", (), ()),
    ("CF", "中非", "Central African Republic", "AFRICA", (), ("中非共和国",)),
    ("CG", "刚果", "The Republic of Congo", "AFRICA", ("Congo", "Congo-Brazzaville"), ("刚果共和国",)),
    ("CD", "刚果民主共和国", "Democratic Republic of the Congo", "AFRICA", ("DR Congo", "DRC", "Congo-Kinshasa"), ("刚果(金)",)),
    ("ZR", "扎伊尔共和国", "The Republic of Zaire", "AFRICA", ("Zaire",), ()),
    ("GA", "加蓬", "Gabon Republic", "AFRICA", ("Gabon",), ()),
    ("GQ", "赤道几内亚", "Equatorial Guinea", "AFRICA", (), ()),
    ("ST", "圣多美和普林西比", "Sao Tome and Principe", "AFRICA", ("São Tomé and Príncipe",), ()),
    ("AO", "安哥拉", "Angola", "AFRICA", (), ()),
    ("ZM", "赞比亚", "Zambia", "AFRICA", (), ()),
    ("ZW", "津巴布韦", "Zimbabwe", "AFRICA", (), ()),
    ("MW", "马拉维", "Malawi", "AFRICA", (), ()),
    ("MZ", "莫桑比克", "Mozambique", "AFRICA", (), ()),
    ("NA", "纳米比亚", "Namibia", "AFRICA", (), ()),
    ("BW", "博茨瓦纳", "Botswana", "AFRICA", (), ()),
    ("LS", "莱索托", "Lesotho", "AFRICA", (), ()),
    ("SZ", "斯威士兰", "Swaziland", "AFRICA", ("Eswatini",), ()),
    ("MG", "马达加斯加", "Madagascar", "AFRICA", (), ()),
    ("MU", "毛里求斯", "Mauritius", "AFRICA", (), ()),
    ("SC", "塞舌尔", "Seychelles", "AFRICA", (), ()),
    ("KM", "科摩罗", "Comoros", "AFRICA", (), ()),
    ("RE", "留尼旺岛", "Reunion", "AFRICA", ("Réunion",), ()),
    ("YT", "马约特岛", "Mayotte", "AFRICA", (), ()),
    ("CV", "佛得角", "Cape Verde Islands", "AFRICA", ("Cape Verde", "Cabo Verde"), ()),
    ("GN", "几内亚", "Guinea", "AFRICA", (), ()),
    ("GW", "几内亚比绍", "Guinea-Bissau", "AFRICA", (), ()),
    ("SL", "塞拉利昂", "Sierra Leone", "AFRICA", (), ()),
    ("LR", "利比里亚", "Liberia", "AFRICA", (), ()),
    ("TG", "多哥", "Togo", "AFRICA", (), ()),
    ("BJ", "贝宁", "Benin", "AFRICA", (), ()),
    ("GM", "冈比亚", "Gambia", "AFRICA", ("The Gambia",), ()),
    ("MR", "毛里塔尼亚", "Mauritania", "AFRICA", (), ()),
    ("RW", "卢旺达", "Rwanda", "AFRICA", (), ()),
    ("BI", "布隆迪", "Burundi", "AFRICA", (), ()),
    ("SH", "圣赫勒拿", "Saint Helena", "AFRICA", (), ()),
    ("EH", "西撒哈拉", "Western Sahara", "AFRICA", (), ()),
    ("IC", "加那利群岛", "Canary Islands", "AFRICA", (), ()),
    ("XI", "马德拉群岛", "Madeira", "AFRICA", (), ()),
    ("XD", "阿森松", "Ascension", "AFRICA", (), ()),
    ("XB", "特里斯坦-达库尼亚群岛", "Tristan Da Cunha", "AFRICA", (), ()),
    # ---- Oceania ----
    ("AU", "澳大利亚", "Australia", "OCEANIA", (), ("澳洲",)),
    ("NZ", "新西兰", "New Zealand", "OCEANIA", (), ()),
    ("PG", "巴布亚新几内亚", "Papua New Guinea", "OCEANIA", (), ()),
    ("FJ", "斐济", "Fiji", "OCEANIA", (), ()),
    ("SB", "所罗门群岛", "Solomon Islands", "OCEANIA", (), ()),
    ("VU", "瓦努阿图", "Vanuatu", "OCEANIA", (), ()),
    ("NC", "新卡里多尼亚", "New Caledonia", "OCEANIA", (), ()),
    ("PF", "法属玻里尼西亚", "French Polynesia", "OCEANIA", (), ()),
    ("WS", "萨摩亚（西萨摩亚）", "Western Samoa", "OCEANIA", ("Samoa",), ("萨摩亚",)),
    ("AS", "东萨摩亚", "American Samoa", "OCEANIA", (), ()),
    ("TO", "汤加", "Tonga", "OCEANIA", (), ()),
    ("KI", "基里巴斯", "Kiribati", "OCEANIA", (), ()),
    ("TV", "图瓦卢", "Tuvalu", "OCEANIA", (), ()),
    ("NR", "瑙鲁", "Nauru", "OCEANIA", (), ()),
    ("PW", "帕劳", "Palau", "OCEANIA", (), ()),
    ("FM", "米克罗尼西亚", "Micronesia", "OCEANIA", ("Federated States of Micronesia",), ("密克罗尼西亚",)),
    ("MH", "马绍尔群岛", "Marshall Islands", "OCEANIA", (), ()),
    ("CK", "库克群岛", "Cook Islands", "OCEANIA", (), ()),
    ("NU", "纽埃", "Niue", "OCEANIA", (), ()),
    ("TK", "托克劳", "Tokelau", "OCEANIA", (), ()),
    ("WF", "瓦利斯群岛和富图纳群岛", "Wallis and Futuna", "OCEANIA", (), ()),
    ("PN", "皮特凯恩群岛", "Pitcairn Islands", "OCEANIA", (), ()),
    ("GU", "关岛", "Guam", "OCEANIA", (), ()),
    ("MP", "北马里亚纳群岛", "Northern Mariana Islands", "OCEANIA", (), ()),
    ("NF", "诺福克岛", "Norfolk Island", "OCEANIA", (), ()),
    ("CC", "科科斯基林群岛", "Cocos Keeling Islands", "OCEANIA", ("Cocos (Keeling) Islands",), ()),
    ("CX", "圣诞岛", "Christmas Island", "OCEANIA", (), ()),
    ("XL", "新西兰属土岛屿", "New Zealand Islands Territories", "OCEANIA", (), ()),
    # ---- Antarctica ----
    ("BV", "布韦岛", "Bouvet Island", "ANTARCTICA", (), ()),
    ("AQ", "南极洲", "Antarctica", "ANTARCTICA", (), ()),
)
