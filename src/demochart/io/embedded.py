"""
Embedded sample data: an aggregated daily dump of registered users of a shipping app.

Columns (all positive integers):
    - sample_date: When the sample was taken, as Unix epoch seconds.
    - total_users: The total number of registered users.
    - new_users: Users (included in total_users) that have not completed their first sign-in.
"""

from __future__ import annotations

__all__ = ["SAMPLE_CSV"]

SAMPLE_CSV: str = """\
sample_date,total_users,new_users
1729008013,660,47
1729094406,667,53
1729180807,672,55
1729267207,677,56
1729353606,681,55
1729440009,683,55
1729526409,685,57
1729612810,684,55
1729699210,684,54
1729785608,688,55
1729872008,692,57
1729958408,693,55
1730044812,694,55
1730131207,695,56
1730217607,700,59
1730304007,702,56
1730390408,699,52
1730476810,701,53
1730563209,704,54
1730653207,713,60
1730739609,719,63
1730826009,718,60
1730912407,723,63
1730998809,726,66
1731085209,730,68
1731171609,729,65
1731258010,740,69
1731344410,750,77
1731430808,752,75
1731517208,756,75
1731603608,759,77
1731690008,761,77
1731776407,763,76
1731862807,762,70
1731949210,761,67
1732035609,766,67
1732122008,763,64
1732208410,769,66
1732294807,769,63
1732381207,777,65
1732467608,781,68
1732554010,782,67
1732640409,780,64
1732726808,780,62
1732813209,783,62
1732899609,784,62
1732986007,784,61
1733072411,788,65
1733158813,793,67
1733245208,782,57
1733331607,785,57
1733418008,788,60
1733504410,791,61
1733590810,792,58
1733677208,796,57
1733763609,793,52
1733850006,796,52
1733936408,798,52
1734022808,802,55
1734109208,807,58
1734195607,810,55
1734282007,815,56
1734368409,817,57
1734454808,819,59
1734541205,823,56
1734627605,823,55
1734714007,828,57
1734800408,832,59
1734886807,840,63
1734973207,841,62
1735059608,842,63
"""
