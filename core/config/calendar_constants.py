# -*- coding: utf-8 -*-
"""
干支历法常量

天干、地支、二十四节气、十二节与月建的对应关系，以及小六壬六神。
"""

# 天干（0 = 甲）
HEAVENLY_STEMS = ('甲', '乙', '丙', '丁', '戊', '己', '庚', '辛', '壬', '癸')

# 地支（0 = 子）
EARTHLY_BRANCHES = ('子', '丑', '寅', '卯', '辰', '巳', '午', '未', '申', '酉', '戌', '亥')

# 生肖，与地支一一对应
ZODIAC_ANIMALS = ('鼠', '牛', '虎', '兔', '龙', '蛇', '马', '羊', '猴', '鸡', '狗', '猪')

# 二十四节气，自小寒起（与节气偏移表顺序一致）
SOLAR_TERMS = (
    '小寒', '大寒', '立春', '雨水', '惊蛰', '春分',
    '清明', '谷雨', '立夏', '小满', '芒种', '夏至',
    '小暑', '大暑', '立秋', '处暑', '白露', '秋分',
    '寒露', '霜降', '立冬', '小雪', '大雪', '冬至',
)

# 十二节 -> 干支月序（立春为 1，即寅月）
JIE_MONTH_INDEX = {
    '立春': 1,
    '惊蛰': 2,
    '清明': 3,
    '立夏': 4,
    '芒种': 5,
    '小暑': 6,
    '立秋': 7,
    '白露': 8,
    '寒露': 9,
    '立冬': 10,
    '大雪': 11,
    '小寒': 12,
}

# 寻找上一个“节”时最多回溯的天数
JIE_SCAN_DAYS = 40

# 小六壬六神（按 1..6 排列）
XIAO_LIU_REN_WORDS = ('大安', '留连', '速喜', '赤口', '小吉', '空亡')

# 农历月、日的中文写法
LUNAR_MONTH_NAMES = ('正', '二', '三', '四', '五', '六', '七', '八', '九', '十', '冬', '腊')
LUNAR_DAY_NAMES = (
    '初一', '初二', '初三', '初四', '初五', '初六', '初七', '初八', '初九', '初十',
    '十一', '十二', '十三', '十四', '十五', '十六', '十七', '十八', '十九', '二十',
    '廿一', '廿二', '廿三', '廿四', '廿五', '廿六', '廿七', '廿八', '廿九', '三十',
)
