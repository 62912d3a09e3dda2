"""Look-alike character folding used for trie lookups.

Only the lookup key is folded; matched text and filler are always emitted
with the original characters.
"""

# Traditional -> simplified Chinese
TRADITIONAL_TO_SIMPLIFIED: dict[str, str] = {
    "萬": "万", "與": "与", "醜": "丑", "專": "专", "業": "业", "叢": "丛",
    "東": "东", "絲": "丝", "丟": "丢", "兩": "两", "嚴": "严", "喪": "丧",
    "個": "个", "豐": "丰", "臨": "临", "為": "为", "麗": "丽", "舉": "举",
    "義": "义", "烏": "乌", "樂": "乐", "喬": "乔", "習": "习", "鄉": "乡",
    "書": "书", "買": "买", "亂": "乱", "爭": "争", "於": "于", "虧": "亏",
    "雲": "云", "亞": "亚", "產": "产", "畝": "亩", "親": "亲", "億": "亿",
    "僅": "仅", "從": "从", "侖": "仑", "倉": "仓", "儀": "仪", "們": "们",
    "價": "价", "眾": "众", "優": "优", "會": "会", "傘": "伞", "偉": "伟",
    "傳": "传", "傷": "伤", "倫": "伦", "偽": "伪", "體": "体", "餘": "余",
    "傭": "佣", "來": "来", "侶": "侣", "俠": "侠", "係": "系", "債": "债",
    "傾": "倾", "側": "侧", "偵": "侦", "備": "备", "兒": "儿",
    "黨": "党", "蘭": "兰", "關": "关", "興": "兴", "養": "养", "獸": "兽",
    "內": "内", "岡": "冈", "冊": "册", "寫": "写", "軍": "军", "農": "农",
    "馮": "冯", "沖": "冲", "決": "决", "況": "况", "凍": "冻", "淨": "净",
    "準": "准", "涼": "凉", "減": "减", "湊": "凑", "幾": "几", "鳳": "凤",
    "憑": "凭", "凱": "凯", "擊": "击", "鑿": "凿", "劃": "划", "劉": "刘",
    "則": "则", "剛": "刚", "創": "创", "刪": "删", "別": "别", "劍": "剑",
    "劑": "剂", "勸": "劝", "辦": "办", "務": "务", "動": "动", "勵": "励",
    "勁": "劲", "勞": "劳", "勢": "势", "勛": "勋", "勻": "匀", "華": "华",
    "協": "协", "單": "单", "賣": "卖", "盧": "卢", "衛": "卫", "卻": "却",
    "廠": "厂", "廳": "厅", "曆": "历", "歷": "历", "厲": "厉", "壓": "压",
    "廁": "厕", "縣": "县", "參": "参", "雙": "双", "發": "发", "變": "变",
    "敘": "叙", "臺": "台", "葉": "叶", "號": "号", "嘆": "叹", "嚇": "吓",
    "嗎": "吗", "啟": "启", "吳": "吴", "嘔": "呕", "員": "员", "響": "响",
    "問": "问", "啞": "哑", "喚": "唤", "嘯": "啸", "圍": "围", "園": "园",
    "圓": "圆", "圖": "图", "團": "团", "聖": "圣", "場": "场", "壞": "坏",
    "塊": "块", "堅": "坚", "壇": "坛", "壩": "坝", "墳": "坟", "墜": "坠",
    "壘": "垒", "墾": "垦", "聲": "声", "處": "处", "複": "复",
    "夠": "够", "頭": "头", "誇": "夸", "奪": "夺", "奮": "奋", "奧": "奥",
    "婦": "妇", "媽": "妈", "嬌": "娇", "孫": "孙", "學": "学", "寧": "宁",
    "寶": "宝", "實": "实", "審": "审", "憲": "宪", "宮": "宫", "對": "对",
    "尋": "寻", "導": "导", "將": "将", "爾": "尔", "塵": "尘", "嘗": "尝",
    "層": "层", "屬": "属", "歲": "岁", "島": "岛", "嶺": "岭", "幣": "币",
    "帥": "帅", "師": "师", "帳": "帐", "帶": "带", "幫": "帮", "廣": "广",
    "莊": "庄", "慶": "庆", "廬": "庐", "應": "应", "廟": "庙", "開": "开",
    "異": "异", "棄": "弃", "張": "张", "彌": "弥", "彎": "弯", "彈": "弹",
    "強": "强", "歸": "归", "當": "当", "錄": "录", "彥": "彦", "徹": "彻",
    "徑": "径", "憶": "忆", "懷": "怀", "態": "态", "總": "总", "惡": "恶",
    "戀": "恋", "懇": "恳", "惱": "恼", "悅": "悦", "懸": "悬", "驚": "惊",
    "慣": "惯", "願": "愿", "戲": "戏", "戰": "战", "戶": "户", "撲": "扑",
    "執": "执", "擴": "扩", "掃": "扫", "揚": "扬", "擾": "扰", "撫": "抚",
    "搶": "抢", "護": "护", "報": "报", "擔": "担", "擁": "拥", "擇": "择",
    "掛": "挂", "擋": "挡", "揮": "挥", "損": "损", "換": "换", "據": "据",
    "數": "数", "斷": "断", "無": "无", "舊": "旧", "時": "时", "曠": "旷",
    "晝": "昼", "顯": "显", "曬": "晒", "術": "术", "機": "机", "殺": "杀",
    "權": "权", "條": "条", "極": "极", "構": "构", "槍": "枪", "標": "标",
    "樣": "样", "橋": "桥", "檢": "检", "歡": "欢", "歐": "欧", "殘": "残",
    "氣": "气", "漢": "汉", "湯": "汤", "溝": "沟", "滅": "灭", "燈": "灯",
    "災": "灾", "點": "点", "煉": "炼", "爐": "炉", "爛": "烂", "熱": "热",
    "愛": "爱", "牽": "牵", "狀": "状", "獨": "独", "獄": "狱", "貓": "猫",
    "現": "现", "環": "环", "畫": "画", "療": "疗", "盡": "尽",
    "監": "监", "盤": "盘", "睜": "睁", "礦": "矿", "碼": "码", "確": "确",
    "禮": "礼", "禍": "祸", "離": "离", "種": "种", "積": "积", "稱": "称",
    "窮": "穷", "競": "竞", "筆": "笔", "節": "节", "範": "范", "築": "筑",
    "簡": "简", "類": "类", "糧": "粮", "緊": "紧", "紅": "红", "約": "约",
    "級": "级", "紀": "纪", "純": "纯", "紙": "纸", "紛": "纷", "組": "组",
    "細": "细", "終": "终", "經": "经", "結": "结", "給": "给", "絕": "绝",
    "統": "统", "網": "网", "線": "线", "練": "练", "績": "绩", "續": "续",
    "罰": "罚", "羅": "罗", "聯": "联", "職": "职", "聽": "听", "肅": "肃",
    "脅": "胁", "腦": "脑", "膽": "胆", "臉": "脸", "藝": "艺",
    "蘇": "苏", "蘋": "苹", "藥": "药", "蟲": "虫", "蠻": "蛮",
    "補": "补", "裝": "装", "規": "规", "視": "视", "覺": "觉",
    "觀": "观", "計": "计", "訂": "订", "認": "认", "討": "讨", "讓": "让",
    "訓": "训", "議": "议", "記": "记", "講": "讲", "許": "许", "論": "论",
    "設": "设", "訪": "访", "證": "证", "評": "评", "識": "识", "詞": "词",
    "試": "试", "詩": "诗", "話": "话", "該": "该", "詳": "详", "語": "语",
    "誤": "误", "說": "说", "請": "请", "諸": "诸", "讀": "读", "課": "课",
    "誰": "谁", "調": "调", "談": "谈", "謝": "谢", "謀": "谋", "豬": "猪",
    "貝": "贝", "負": "负", "財": "财", "責": "责", "販": "贩", "貨": "货",
    "貧": "贫", "購": "购", "貫": "贯", "費": "费", "貿": "贸", "資": "资",
    "賊": "贼", "賭": "赌", "賽": "赛", "贏": "赢", "趕": "赶", "趙": "赵",
    "躍": "跃", "車": "车", "軌": "轨", "轉": "转", "輪": "轮", "軟": "软",
    "較": "较", "載": "载", "輕": "轻", "輸": "输", "辯": "辩",
    "邊": "边", "達": "达", "遷": "迁", "過": "过", "運": "运", "還": "还",
    "這": "这", "進": "进", "遠": "远", "違": "违", "連": "连", "遲": "迟",
    "適": "适", "選": "选", "遺": "遗", "郵": "邮", "鄰": "邻", "醫": "医",
    "釋": "释", "裡": "里", "針": "针", "釣": "钓", "鈔": "钞", "鐵": "铁",
    "鈴": "铃", "鉛": "铅", "銀": "银", "銷": "销", "鋒": "锋", "錯": "错",
    "鍋": "锅", "鍵": "键", "鎖": "锁", "鏡": "镜", "長": "长", "門": "门",
    "閃": "闪", "閉": "闭", "間": "间", "閱": "阅", "闖": "闯",
    "隊": "队", "陽": "阳", "陰": "阴", "陣": "阵", "際": "际", "陸": "陆",
    "險": "险", "隨": "随", "隱": "隐", "難": "难", "雞": "鸡", "電": "电",
    "霧": "雾", "靈": "灵", "靜": "静", "韓": "韩", "頁": "页", "頂": "顶",
    "項": "项", "順": "顺", "須": "须", "預": "预", "領": "领", "頻": "频",
    "題": "题", "顏": "颜", "風": "风", "飛": "飞", "飯": "饭", "飲": "饮",
    "飽": "饱", "館": "馆", "馬": "马", "駕": "驾", "驗": "验", "騙": "骗",
    "騎": "骑", "髮": "发", "鬥": "斗", "魚": "鱼", "鮮": "鲜", "鳥": "鸟",
    "鴨": "鸭", "鵝": "鹅", "麥": "麦", "黃": "黄", "齊": "齐", "齒": "齿",
    "龍": "龙", "龜": "龟", "國": "国",
}

# Full-width ASCII block and the ideographic space
FULLWIDTH_TO_ASCII: dict[str, str] = {chr(0xFF01 + k): chr(0x21 + k) for k in range(94)}
FULLWIDTH_TO_ASCII["　"] = " "
# The full-width plus stays literal so it never turns a word into a chain rule.
del FULLWIDTH_TO_ASCII["\uff0b"]

VARIANTS: dict[str, str] = {**FULLWIDTH_TO_ASCII, **TRADITIONAL_TO_SIMPLIFIED}


def canonical(ch: str) -> str:
    """Return the lookup form of a single character."""
    return VARIANTS.get(ch, ch)


def canonical_text(text: str) -> str:
    return "".join(VARIANTS.get(ch, ch) for ch in text)
