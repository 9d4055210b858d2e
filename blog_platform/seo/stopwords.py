"""
Stop-word lists used by the keyword extractor.

Both sets are immutable and built once at import time.
"""

CHINESE_STOP_WORDS = frozenset([
    "的", "了", "在", "是", "我", "有", "和", "就", "不", "人", "都", "一", "一個",
    "上", "也", "很", "到", "說", "要", "去", "你", "會", "著", "沒有", "看", "好",
    "自己", "這", "那", "這個", "那個", "之", "與", "及", "等", "或", "但", "而",
    "因為", "所以", "如果", "可以", "於", "被", "把", "給", "讓", "向", "從", "對",
    "為", "以", "它", "們", "他", "她", "我們", "你們", "他們", "她們", "這些",
    "那些", "什麼", "怎麼", "為什麼", "哪個", "哪裡", "誰", "何時", "如何", "還是",
    "或者", "並且", "雖然", "但是", "然而", "不過", "而且", "因此", "因而", "於是",
    "然後", "接著", "首先", "其次", "最後", "例如", "比如", "像是", "像", "如同",
    "好像", "似乎", "可能", "也許", "大概", "應該", "必須", "需要", "應當", "得",
    "該", "須", "需", "當", "須要",
])

ENGLISH_STOP_WORDS = frozenset([
    "the", "a", "an", "is", "are", "was", "were", "be", "been", "being", "have",
    "has", "had", "do", "does", "did", "will", "would", "could", "should", "may",
    "might", "must", "shall", "can", "need", "dare", "ought", "used", "to", "of",
    "in", "for", "on", "with", "at", "by", "from", "as", "into", "through",
    "during", "before", "after", "above", "below", "between", "under", "and",
    "but", "or", "yet", "so", "if", "because", "although", "though", "while",
    "where", "when", "that", "which", "who", "whom", "whose", "what", "whatever",
    "whoever", "whomever", "whichever", "this", "these", "those", "i", "me", "my",
    "myself", "we", "our", "ours", "ourselves", "you", "your", "yours",
    "yourself", "yourselves", "he", "him", "his", "himself", "she", "her",
    "hers", "herself", "it", "its", "itself", "they", "them", "their", "theirs",
    "themselves", "am", "having", "doing",
])
