"""Glyph table for Lato Regular, ASCII and Latin-1 Supplement subset.

Lato is copyright (c) 2010-2015 by tyPoland Lukasz Dziedzic and is
licensed under the SIL Open Font License, Version 1.1.

Every entry maps a character code to ``(advance, outline)`` in font design
units. An outline is a list of TrueType contours separated by ``;``. Points
are separated by spaces: ``x,y`` is an on-curve point and ``x:y`` is an
off-curve quadratic control point. Glyphs without ink have an empty outline.
"""

from __future__ import annotations

FAMILY = "Lato"
LICENSE = "SIL Open Font License, Version 1.1"
UNITS_PER_EM = 2000
ASCENDER = 1974
DESCENDER = -426

# Drawn for any character outside GLYPHS.
NOTDEF: tuple[int, str] = (1063, "250,1141 275:1163 332:1201 400:1230 479:1247 525,1247 588:1247 691:1212 764:1148 805:1057 805,1001 805:946 775:866 730:807 676:764 628:726 593:689 589,666 572,561 450,561 438,678 434:712 460:763 505:806 560:846 608:892 640:950 640,990 640:1041 567:1101 510,1101 469:1101 413:1083 373:1061 345:1043 334,1043 309:1043 297,1065;396,292 396:339 458:403 506,403 528:403 568:386 597:356 614:315 614,292 614:269 597:229 568:199 528:182 506,182 458:182 396:245;45,1433 1019,1433 1019,0 45,0;95,54 962,54 962,1378 95,1378")

GLYPHS: dict[int, tuple[int, str]] = {
    0x20: (386, ""),  # U+0020
    0x21: (686, "430,1433 430,861 430:816 427:730 421:643 412:552 406,500 285,500 279:552 270:643 264:730 261:816 261,861 261,1433;218,110 218:136 237:182 270:216 316:236 342,236 368:236 414:216 448:182 467:136 467,110 467:83 448:38 414:4 368:-15 342,-15 316:-15 270:4 237:38 218:83"),  # U+0021 !
    0x22: (794, "307,1433 307,1143 291,988 288:956 260:921 229,921 203:921 174:956 168,988 152,1143 152,1433;640,1433 640,1143 624,988 621:956 593:921 562,921 536:921 507:956 501,988 485,1143 485,1433"),  # U+0022 "
    0x23: (1160, "790,423 706,0 625,0 602:0 570:34 570,61 570:65 571:72 572,77 643,423 396,423 325,68 317:31 272:0 243,0 164,0 249,423 103,423 80:423 54:446 54,474 54:479 55:491 56,497 64,554 268,554 333,880 101,880 114,954 119:983 155:1011 194,1011 352,1011 424,1369 430:1399 473:1433 503,1433 583,1433 499,1011 746,1011 830,1433 909,1433 934:1433 967:1403 967,1379 967:1371 966,1366 893,1011 1105,1011 1092,936 1087:907 1050:880 1012,880 874,880 809,554 988,554 1012:554 1038:531 1038,502 1038:497 1037:486 1036,480 1027,423;415,554 662,554 727,880 480,880"),  # U+0023 #
    0x24: (1160, "498,-12 377:-1 178:96 106,171 159,253 166:264 192:278 206,278 225:278 273:240 343:191 440:145 508,137 545,668 475:689 340:742 233:827 168:956 168,1053 168:1126 225:1265 334:1373 494:1442 598,1446 608,1590 610:1609 636:1639 658,1639 724,1639 710,1441 815:1428 967:1346 1027,1288 984,1222 964:1192 938,1192 924:1192 883:1217 825:1250 749:1283 700,1290 667,806 739:784 879:732 991:650 1060:527 1060,435 1060:345 1000:187 885:67 718:-8 611,-14 599,-190 597:-209 570:-238 549,-238 483,-238;891,407 891:457 854:529 790:581 704:619 655,635 621,137 686:143 787:188 856:258 891:351;336,1071 336:1023 370:952 430:898 510:858 557,842 587,1293 522:1287 427:1247 366:1187 336:1112"),  # U+0024 $
    0x25: (1572, "707,1087 707:1003 655:870 568:779 452:731 389,731 321:731 206:779 120:870 72:1003 72,1087 72:1173 120:1307 206:1399 321:1447 389,1447 456:1447 573:1399 658:1307 707:1173;568,1087 568:1153 540:1245 491:1304 426:1330 389,1330 352:1330 287:1304 239:1245 212:1153 212,1087 212:1022 239:931 287:874 352:849 389,849 426:849 491:874 540:931 568:1022;1208,1397 1221:1414 1250:1433 1274,1433 1402,1433 355,29 345:16 317:0 298,0 166,0;1499,338 1499:254 1447:122 1360:31 1245:-17 1182,-17 1114:-17 999:31 913:122 865:254 865,338 865:424 913:559 999:651 1114:699 1182,699 1249:699 1365:651 1451:559 1499:424;1361,338 1361:404 1333:497 1284:555 1219:581 1182,581 1145:581 1080:555 1032:497 1005:404 1005,338 1005:273 1032:183 1080:126 1145:101 1182,101 1219:101 1284:126 1333:183 1361:273"),  # U+0025 %
    0x26: (1406, "660,1449 739:1449 869:1398 964:1314 1019:1203 1023,1143 912,1121 907:1120 903,1120 890:1120 867:1134 862,1152 855:1178 824:1234 775:1280 706:1310 660,1310 610:1310 530:1278 473:1221 442:1144 442,1099 442:1064 459:1000 493:935 547:866 585,828 997,409 1035:476 1080:623 1088,697 1090:716 1110:738 1128,738 1238,738 1236:623 1166:401 1100,304 1400,0 1228,0 1199:0 1163:14 1141,36 997,181 903:90 658:-16 511,-16 431:-16 277:38 156:141 82:289 82,382 82:452 129:577 212:683 326:767 394,797 333:874 275:1020 275,1098 275:1171 328:1299 428:1394 571:1449;263,396 263:331 311:232 389:164 489:129 541,129 653:129 831:211 899,279 476,706 370:649 263:490"),  # U+0026 &
    0x27: (460, "307,1433 307,1143 291,988 288:956 260:921 229,921 203:921 174:956 168,988 152,1143 152,1433"),  # U+0027 '
    0x28: (600, "289,629 289:415 399:12 503,-171 509:-182 513:-198 513,-206 513:-220 499:-238 488,-245 409,-293 334:-178 229:48 164:276 134:507 134,629 134:750 164:982 229:1209 334:1435 409,1551 488,1502 499:1495 513:1477 513,1463 513:1448 503,1429 398:1247 289:843"),  # U+0028 (
    0x29: (600, "298,629 298:843 189:1247 84,1429 74:1448 74,1463 74:1477 88:1495 99,1502 178,1551 253:1435 358:1209 423:982 453:750 453,629 453:507 423:276 358:48 253:-178 178,-293 99,-245 88:-238 74:-220 74,-206 74:-198 78:-182 84,-171 188:12 298:415"),  # U+0029 )
    0x2a: (800, "354,863 354,1060 354:1079 359:1113 366,1129 346:1104 313,1084 141,985 97,1060 269,1160 305:1181 342,1184 322:1186 287:1197 269,1209 96,1310 140,1385 313,1285 348:1265 370,1233 361:1251 354:1288 354,1308 354,1506 442,1506 442,1309 442:1268 428,1237 439:1252 466:1274 483,1285 655,1384 699,1309 527,1209 510:1198 477:1186 459,1184 477:1182 510:1171 527,1160 700,1059 656,984 483,1084 465:1095 437:1117 426,1133 442:1100 442,1061 442,863"),  # U+002A *
    0x2b: (1160, "651,1166 651,739 1058,739 1058,604 651,604 651,174 505,174 505,604 100,604 100,739 505,739 505,1166"),  # U+002B +
    0x2c: (424, "94,123 94:146 111:187 142:218 186:236 212,236 242:236 289:214 320:175 336:124 336,94 336:49 310:-48 262:-143 191:-233 146,-271 116,-242 103:-230 103,-214 103:-201 117,-187 127:-176 158:-139 190:-91 217:-33 223,0 210,0 184:0 142:18 111:51 94:96"),  # U+002C ,
    0x2d: (694, "100,675 594,675 594,524 100,524"),  # U+002D -
    0x2e: (424, "88,110 88:136 107:182 140:216 186:236 212,236 238:236 284:216 318:182 337:136 337,110 337:83 318:38 284:4 238:-15 212,-15 186:-15 140:4 107:38 88:83"),  # U+002E .
    0x2f: (746, "161,-21 147:-56 92:-90 63,-90 -12,-90 589,1407 602:1439 650:1473 683,1473 758,1473"),  # U+002F /
    0x30: (1160, "1100,716 1100:528 1019:253 879:73 688:-15 579,-15 469:-15 280:73 140:253 60:528 60,716 60:904 140:1180 280:1361 469:1449 579,1449 688:1449 879:1361 1019:1180 1100:904;915,716 915:880 860:1103 767:1239 645:1298 579,1298 513:1298 391:1239 299:1103 244:880 244,716 244:552 299:330 391:194 513:135 579,135 645:135 767:194 860:330 915:552"),  # U+0030 0
    0x31: (1160, "287,136 595,136 595,1113 595:1157 598,1202 342,983 332:975 312:968 303,968 288:968 264:981 258,990 202,1067 628,1436 773,1436 773,136 1055,136 1055,0 287,0"),  # U+0031 1
    0x32: (1160, "601,1449 692:1449 850:1395 965:1292 1031:1144 1031,1050 1031:970 983:834 901:709 794:592 734,531 357,145 397:156 479:169 517,169 997,169 1026:169 1060:135 1060,108 1060,0 104,0 104,61 104:80 119:120 136,137 595,598 652:656 746:763 813:871 849:982 849,1045 849:1108 809:1203 739:1265 645:1296 591,1296 537:1296 445:1264 374:1207 325:1129 315,1082 307:1053 275:1027 249,1027 244:1027 233:1028 226,1029 133,1045 147:1143 227:1294 350:1396 509:1449"),  # U+0032 2
    0x33: (1160, "620,1449 711:1449 865:1397 976:1301 1038:1165 1038,1082 1038:1014 1003:907 938:826 846:770 789,753 929:716 1070:542 1070,411 1070:312 995:154 865:43 692:-16 593,-16 479:-16 317:41 205:141 133:278 108,358 184,390 205:399 226,399 246:399 277:382 285,364 287:360 291:351 293,346 307:317 347:244 415:180 516:136 591,136 666:136 779:185 854:263 892:359 892,406 892:464 861:560 780:630 637:670 525,670 525,799 616:800 745:838 827:904 864:996 864,1052 864:1114 825:1206 757:1266 664:1296 610,1296 556:1296 464:1264 393:1207 345:1128 333,1082 325:1053 293:1027 268,1027 263:1027 252:1028 245,1029 152,1045 166:1143 246:1294 369:1396 528:1449"),  # U+0033 3
    0x34: (1160, "903,517 1120,517 1120,415 1120:399 1101:377 1081,377 903,377 903,0 746,0 746,377 111,377 91:377 62:400 58,417 40,508 737,1433 903,1433;746,1108 746:1134 749:1194 754,1226 233,517 746,517"),  # U+0034 4
    0x35: (1160, "978,1355 978:1317 930:1268 873,1268 423,1268 357,892 469:916 564,916 676:916 847:850 963:734 1022:576 1022,483 1022:369 942:185 803:54 615:-16 506,-16 443:-16 327:9 227:51 141:105 108,135 162,211 180:237 210,237 229:237 280:206 352:168 449:137 516,137 591:137 711:185 796:274 842:398 842,475 842:542 803:650 724:726 606:768 527,768 473:768 357:750 295,730 183,763 299,1433 978,1433"),  # U+0035 5
    0x36: (1160, "650,878 736:878 890:821 1006:712 1074:553 1074,451 1074:352 1002:182 873:56 691:-16 582,-16 474:-16 299:53 175:180 108:361 108,473 108:567 192:779 283,901 646,1390 660:1408 710:1433 742,1433 900,1433 403,804 454:839 578:878;280,442 280:373 320:259 397:177 508:132 579,132 651:132 767:178 850:260 895:372 895,438 895:508 851:621 771:700 659:742 592,742 520:742 404:693 323:610 280:501"),  # U+0036 6
    0x37: (1160, "1084,1433 1084,1353 1084:1319 1069:1275 1061,1260 468,63 455:37 409:0 370,0 243,0 845,1182 858:1207 885:1249 902,1268 154,1268 137:1268 110:1295 110,1312 110,1433"),  # U+0037 7
    0x38: (1160, "579,-16 472:-16 294:41 166:147 96:298 96,392 96:530 240:709 374,747 261:789 146:956 146,1072 146:1151 208:1289 322:1391 481:1449 579,1449 676:1449 836:1391 950:1289 1012:1151 1012,1072 1012:956 896:789 784,747 918:709 1062:530 1062,392 1062:298 991:147 864:41 686:-16;579,126 649:126 760:165 837:236 878:335 878,395 878:469 829:574 746:640 638:671 579,671 520:671 412:640 329:574 280:469 280,395 280:335 321:236 398:165 509:126;579,814 649:814 748:857 810:928 838:1020 838,1069 838:1119 805:1207 740:1273 643:1311 579,1311 515:1311 418:1273 353:1207 320:1119 320,1069 320:1020 348:928 410:857 509:814"),  # U+0038 8
    0x39: (1160, "549,588 468:588 323:642 213:747 148:900 148,999 148:1093 218:1257 344:1379 518:1449 622,1449 725:1449 893:1381 1013:1259 1078:1089 1078,986 1078:924 1055:813 1011:707 950:602 911,546 562,42 549:23 501:0 470,0 306,0 742,571 764:600 802:652 819,678 764:634 626:588;907,1007 907:1074 864:1183 788:1259 683:1300 620,1300 554:1300 445:1257 368:1181 326:1075 326,1012 326:944 365:837 438:763 543:725 608,725 680:725 791:772 867:850 907:952"),  # U+0039 9
    0x3a: (504, "128,110 128:136 147:182 180:216 226:236 252,236 278:236 324:216 358:182 377:136 377,110 377:83 358:38 324:4 278:-15 252,-15 226:-15 180:4 147:38 128:83;128,860 128:886 147:932 180:966 226:986 252,986 278:986 324:966 358:932 377:886 377,860 377:833 358:788 324:754 278:735 252,735 226:735 180:754 147:788 128:833"),  # U+003A :
    0x3b: (504, "134,123 134:146 151:187 182:218 226:236 252,236 282:236 329:214 360:175 376:124 376,94 376:49 350:-48 302:-143 231:-233 186,-271 156,-242 143:-230 143,-214 143:-201 157,-187 167:-176 198:-139 230:-91 257:-33 263,0 250,0 224:0 182:18 151:51 134:96;128,860 128:886 147:932 180:966 226:986 252,986 278:986 324:966 358:932 377:886 377,860 377:833 358:788 324:754 278:735 252,735 226:735 180:754 147:788 128:833"),  # U+003B ;
    0x3c: (1160, "148,710 922,1111 922,984 922:967 906:942 886,932 437,704 417:693 372:678 347,672 372:667 417:651 437,641 886,414 906:404 922:378 922,362 922,234 148,636"),  # U+003C <
    0x3d: (1160, "150,574 1009,574 1009,439 150,439;150,909 1009,909 1009,774 150,774"),  # U+003D =
    0x3e: (1160, "238,234 238,362 238:378 254:404 274,414 723,641 743:651 786:667 811,672 786:678 743:693 723,704 274,932 254:942 238:967 238,984 238,1111 1011,710 1011,636"),  # U+003E >
    0x3f: (796, "34,1305 65:1334 140:1386 229:1426 332:1449 392,1449 471:1449 606:1403 704:1319 760:1199 760,1124 760:1048 715:938 646:855 564:794 493:740 442:686 438,653 420,500 298,500 286,666 286,677 286:719 331:784 400:841 479:898 548:967 593:1055 593,1115 593:1158 559:1228 501:1277 422:1303 377,1303 316:1303 229:1273 169:1237 132:1207 120,1207 95:1207 81,1230;230,110 230:136 249:182 282:216 328:236 354,236 380:236 426:216 460:182 479:136 479,110 479:83 460:38 426:4 380:-15 354,-15 328:-15 282:4 249:38 230:83"),  # U+003F ?
    0x40: (1644, "1167,186 1089:186 991:261 978,339 920:258 784:188 706,188 646:188 558:229 499:302 470:402 470,460 470:545 535:718 663:857 854:945 979,945 1046:945 1147:924 1192,904 1099,543 1080:468 1080,419 1080:383 1098:336 1129:309 1170:299 1193,299 1242:299 1330:355 1397:457 1436:600 1436,687 1436:825 1347:1033 1192:1172 981:1241 859,1241 725:1241 491:1139 317:959 217:713 217,568 217:398 324:141 509:-33 758:-121 901,-121 1053:-121 1286:-55 1371,-4 1386:5 1398,5 1419:5 1429,-19 1454,-85 1347:-157 1074:-239 901,-239 728:-239 430:-129 211:78 86:378 86,568 86:677 141:879 241:1054 381:1199 553:1302 751:1359 859,1359 951:1359 1127:1319 1284:1241 1416:1126 1511:977 1564:794 1564,687 1564:579 1503:396 1396:262 1251:186;741,306 772:306 835:326 894:376 943:462 960,527 1036,822 997:831 951,831 876:831 751:768 661:666 610:534 610,465 610:393 676:306"),  # U+0040 @
    0x41: (1360, "1353,0 1203,0 1177:0 1145:26 1137,46 1003,392 360,392 226,46 219:28 185:0 160,0 10,0 583,1433 780,1433;414,532 949,532 724,1115 702:1169 681,1250 670:1209 649:1140 639,1114"),  # U+0041 A
    0x42: (1294, "174,0 174,1433 631,1433 763:1433 954:1381 1077:1285 1136:1146 1136,1059 1136:1006 1103:908 1036:824 935:758 867,737 1024:706 1184:542 1184,408 1184:317 1117:167 988:59 801:0 681,0;368,653 368,154 678,154 761:154 880:192 957:261 993:356 993,413 993:524 836:653 677,653;368,791 624,791 706:791 826:827 905:891 943:982 943,1036 943:1162 791:1280 631,1280 368,1280"),  # U+0042 B
    0x43: (1370, "1184,296 1200:296 1213,283 1289,200 1201:98 950:-16 773,-16 618:-16 366:91 188:284 90:554 90,716 90:878 195:1148 385:1342 650:1449 810,1449 968:1449 1197:1351 1286,1267 1223,1178 1216:1168 1198:1155 1181,1155 1168:1155 1139:1174 1099:1202 1045:1234 971:1262 873:1281 809,1281 694:1281 503:1202 365:1056 288:846 288,716 288:582 365:372 498:227 680:151 785,151 849:151 951:166 1038:198 1113:247 1151,281 1168:296"),  # U+0043 C
    0x44: (1506, "1416,716 1416:555 1314:291 1128:103 868:0 710,0 174,0 174,1433 710,1433 868:1433 1128:1330 1314:1141 1416:877;1217,716 1217:848 1145:1056 1013:1200 825:1276 710,1276 369,1276 369,157 710,157 825:157 1013:233 1145:376 1217:584"),  # U+0044 D
    0x45: (1162, "1057,1433 1057,1275 369,1275 369,799 926,799 926,647 369,647 369,158 1057,158 1057,0 174,0 174,1433"),  # U+0045 E
    0x46: (1132, "1057,1433 1057,1275 369,1275 369,774 957,774 957,616 369,616 369,0 174,0 174,1433"),  # U+0046 F
    0x47: (1468, "813,141 871:141 968:152 1054:174 1130:205 1168,225 1168,541 946,541 927:541 904:563 904,579 904,689 1344,689 1344,139 1290:100 1173:42 1040:3 888:-16 799,-16 643:-16 383:91 195:284 90:554 90,716 90:880 193:1150 384:1343 655:1449 823,1449 908:1449 1054:1424 1179:1377 1285:1310 1331,1268 1276,1180 1259:1153 1232,1153 1216:1153 1197,1164 1172:1178 1110:1218 1021:1255 900:1281 817,1281 696:1281 500:1202 362:1055 288:846 288,716 288:580 365:367 505:219 697:141"),  # U+0047 G
    0x48: (1512, "1336,0 1141,0 1141,652 369,652 369,0 174,0 174,1433 369,1433 369,794 1141,794 1141,1433 1336,1433"),  # U+0048 H
    0x49: (614, "404,0 210,0 210,1433 404,1433"),  # U+0049 I
    0x4a: (888, "713,495 713:375 654:185 539:54 371:-16 262,-16 165:-16 60,12 62:41 68:98 71,126 73:143 94:164 115,164 133:164 193:146 243,146 309:146 412:186 483:270 520:401 520,491 520,1433 713,1433"),  # U+004A J
    0x4b: (1362, "387,805 460,805 498:805 543:824 563,847 1040,1387 1062:1412 1103:1433 1135,1433 1300,1433 754,816 733:793 696:761 675,751 703:742 745:706 768,679 1338,0 1170,0 1151:0 1125:6 1106:16 1090:32 1082,41 587,610 576:622 557:639 532:651 499:656 475,656 387,656 387,0 194,0 194,1433 387,1433"),  # U+004B K
    0x4c: (1028, "368,163 988,163 988,0 174,0 174,1433 368,1433"),  # U+004C L
    0x4d: (1840, "879,518 893:494 914:441 924,414 934:442 956:493 970,519 1455,1400 1468:1423 1496:1433 1522,1433 1665,1433 1665,0 1495,0 1495,1053 1495:1074 1497:1122 1499,1147 1008,251 983:206 938,206 910,206 865:206 840,251 338,1150 341:1124 344:1074 344,1053 344,0 174,0 174,1433 317,1433 343:1433 371:1423 384,1400 879,518"),  # U+004D M
    0x4e: (1512, "274,1433 300:1433 325:1420 341,1400 1171,320 1168:346 1166:395 1166,418 1166,1433 1336,1433 1336,0 1238,0 1215:0 1184:16 1169,35 340,1114 342:1089 344:1041 344,1021 344,0 174,0 174,1433 274,1433"),  # U+004E N
    0x4f: (1596, "1505,716 1505:555 1403:286 1217:92 956:-15 798,-15 640:-15 380:92 194:286 92:555 92,716 92:877 194:1146 380:1341 640:1449 798,1449 956:1449 1217:1341 1403:1146 1505:877;1306,716 1306:848 1234:1058 1102:1203 914:1281 798,1281 683:1281 495:1203 362:1058 290:848 290,716 290:584 362:375 495:230 683:153 798,153 914:153 1102:230 1234:375 1306:584"),  # U+004F O
    0x50: (1222, "387,536 387,0 194,0 194,1433 617,1433 753:1433 954:1370 1086:1254 1151:1090 1151,989 1151:889 1081:723 946:603 746:536 617,536;387,690 617,690 700:690 827:734 913:813 957:923 957,989 957:1126 788:1280 617,1280 387,1280"),  # U+0050 P
    0x51: (1596, "1505,716 1505:615 1464:433 1386:276 1274:148 1204,101 1572,-296 1412,-296 1376:-296 1320:-276 1297,-251 1045,23 988:5 865:-15 798,-15 640:-15 380:92 194:286 92:555 92,716 92:877 194:1146 380:1341 640:1449 798,1449 956:1449 1217:1341 1403:1146 1505:877;1306,716 1306:848 1234:1058 1102:1203 914:1281 798,1281 683:1281 495:1203 362:1058 290:848 290,716 290:584 362:375 495:230 683:153 798,153 914:153 1102:230 1234:375 1306:584"),  # U+0051 Q
    0x52: (1288, "387,598 387,0 194,0 194,1433 599,1433 735:1433 933:1378 1062:1274 1124:1127 1124,1036 1124:960 1076:828 985:723 854:649 771,630 807:609 835,569 1253,0 1081,0 1028:0 1003,41 631,553 614:577 574:598 534,598;387,739 590,739 675:739 804:780 891:855 935:959 935,1022 935:1150 766:1280 599,1280 387,1280"),  # U+0052 R
    0x53: (1060, "908,1209 899:1194 879:1179 863,1179 846:1179 801:1213 732:1254 635:1288 566,1288 501:1288 401:1253 334:1193 300:1112 300,1065 300:1005 359:926 456:870 579:829 708:785 831:730 928:646 987:524 987,435 987:341 923:176 800:54 621:-16 507,-16 368:-16 139:85 58,171 114,263 122:274 145:289 159,289 180:289 234:244 315:190 430:145 513,145 582:145 690:183 765:252 805:348 805,407 805:472 746:555 650:611 527:650 398:691 275:745 179:831 120:960 120,1055 120:1131 179:1273 291:1383 456:1449 563,1449 683:1449 881:1373 955,1301"),  # U+0053 S
    0x54: (1180, "1150,1433 1150,1270 687,1270 687,0 493,0 493,1270 28,1270 28,1433"),  # U+0054 T
    0x55: (1460, "731,154 820:154 960:214 1057:322 1108:472 1108,562 1108,1433 1301,1433 1301,562 1301:438 1222:226 1075:71 863:-17 731,-17 599:-17 387:71 239:226 160:438 160,562 160,1433 353,1433 353,563 353:473 404:323 501:215 642:154"),  # U+0055 U
    0x56: (1360, "8,1433 163,1433 189:1433 221:1407 229,1387 634,376 648:342 671:262 682,219 691:262 712:342 726,376 1129,1387 1136:1404 1170:1433 1195,1433 1351,1433 767,0 592,0"),  # U+0056 V
    0x57: (2038, "14,1433 175,1433 201:1433 235:1407 241,1387 537,391 545:364 558:302 564,268 571:302 585:365 594,391 931,1387 937:1404 972:1433 997,1433 1053,1433 1079:1433 1112:1407 1119,1387 1454,391 1472:339 1486,272 1492:305 1502:365 1510,391 1807,1387 1812:1405 1847:1433 1872,1433 2023,1433 1576,0 1402,0 1039,1093 1028:1124 1019,1165 1014:1145 1005:1108 1000,1093 635,0 461,0"),  # U+0057 W
    0x58: (1286, "507,736 34,1433 227,1433 248:1433 268:1419 276,1406 650,832 657:853 671,878 1024,1402 1033:1416 1054:1433 1069,1433 1254,1433 779,745 1270,0 1078,0 1056:0 1031:23 1023,37 639,638 632:617 621,598 247,37 238:23 215:0 194,0 14,0"),  # U+0058 X
    0x59: (1258, "726,570 726,0 533,0 533,570 8,1433 178,1433 204:1433 234:1407 245,1388 573,831 593:796 620:734 631,704 642:735 668:797 688,831 1015,1388 1024:1404 1055:1433 1080,1433 1252,1433"),  # U+0059 Y
    0x5a: (1248, "1172,1433 1172,1361 1172:1327 1151,1297 340,158 1158,158 1158,0 86,0 86,76 86:106 105,133 917,1275 124,1275 124,1433"),  # U+005A Z
    0x5b: (600, "142,-289 142,1533 510,1533 510,1463 510:1441 483:1416 461,1416 292,1416 292,-171 461,-171 483:-171 510:-196 510,-219 510,-289"),  # U+005B [
    0x5c: (750, "-20,1473 56,1473 89:1473 137:1439 150,1407 751,-90 676,-90 647:-90 591:-56 578,-21"),  # U+005C \
    0x5d: (600, "90,-219 90:-199 117:-171 139,-171 308,-171 308,1416 139,1416 117:1416 90:1443 90,1463 90,1533 458,1533 458,-289 90,-289"),  # U+005D ]
    0x5e: (1160, "516,1433 631,1433 989,787 860,787 843:787 819:807 811,821 615,1173 602:1196 583:1239 576,1260 562:1216 539,1173 345,821 337:807 314:787 294,787 158,787"),  # U+005E ^
    0x5f: (788, "788,-165 788,-285 0,-285 0,-165"),  # U+005F _
    0x60: (614, "207,1449 240:1449 272:1428 286,1405 435,1163 333,1163 312:1163 286:1176 272,1191 38,1449"),  # U+0060 `
    0x61: (1014, "890,0 811,0 785:0 753:16 748,42 728,136 688:100 612:43 528:4 433:-16 375,-16 316:-16 213:17 137:83 92:184 92,253 92:313 158:424 305:510 543:565 715,569 715,648 715:766 614:887 515,887 450:887 361:854 296:813 249:780 226,780 208:780 181:799 173,813 141,870 225:951 419:1031 537,1031 622:1031 754:975 844:875 890:733 890,648;428,109 475:109 553:128 622:163 685:213 715,245 715,456 592:452 420:421 312:371 263:303 263,261 263:221 289:163 333:126 393:109"),  # U+0061 a
    0x62: (1118, "152,0 152,1473 331,1473 331,867 394:940 557:1029 662,1029 750:1029 892:963 992:832 1046:639 1046,513 1046:401 986:208 873:67 710:-14 608,-14 510:-14 373:62 322,130 313,38 305:0 267,0;604,887 517:887 386:807 331,734 331,244 379:178 496:124 568,124 710:124 862:326 862,513 862:612 827:754 761:845 665:887"),  # U+0062 b
    0x63: (934, "837,833 829:822 813:810 798,810 783:810 748:835 694:865 617:890 561,890 487:890 373:837 296:737 257:595 257,507 257:415 299:272 375:175 484:124 552,124 617:124 701:155 757:193 793:224 811,224 834:224 845,207 895,142 829:61 631:-14 521,-14 426:-14 263:56 143:189 74:383 74,507 74:620 137:812 258:951 436:1029 551,1029 657:1029 821:960 884,897"),  # U+0063 c
    0x64: (1118, "859,0 821:0 811,37 795,160 730:81 563:-14 455,-14 368:-14 226:53 126:183 72:377 72,503 72:615 132:808 245:950 407:1031 510,1031 603:1031 735:968 787,911 787,1473 965,1473 965,0;514,130 601:130 732:210 787,283 787,773 738:839 621:892 550,892 408:892 256:690 256,503 256:404 290:263 356:172 452:130"),  # U+0064 d
    0x65: (1048, "547,1029 638:1029 792:968 904:853 967:684 967,576 967:534 949:506 924,506 250,506 252:410 300:268 384:173 500:126 572,126 639:126 736:157 806:193 853:224 870,224 892:224 904,207 954,142 921:102 829:43 724:5 612:-14 557,-14 452:-14 275:57 146:194 74:396 74,527 74:633 139:817 261:952 437:1029;551,898 422:898 274:749 256,617 807,617 807:679 773:782 707:857 612:898"),  # U+0065 e
    0x66: (674, "186,0 186,861 74,874 53:879 26:900 26,920 26,993 186,993 186,1091 186:1178 235:1313 326:1406 454:1454 534,1454 602:1454 660,1434 656,1345 655:1325 623:1317 594,1317 563,1317 517:1317 442:1293 388:1239 359:1151 359,1086 359,993 652,993 652,864 365,864 365,0"),  # U+0066 f
    0x67: (1022, "487,1030 553:1030 668:1001 715,973 990,973 990,907 990:874 948,865 833,849 867:784 867,704 867:630 810:509 709:423 570:377 487,377 416:377 353,394 321:374 288:328 288,306 288:270 346:233 442:217 564:213 691:204 813:182 909:132 967:44 967,-26 967:-91 902:-213 780:-308 604:-365 493,-365 382:-365 215:-321 105:-247 50:-150 50,-97 50:-22 145:83 228,114 185:134 134:201 134,257 134:279 150:326 183:372 231:414 263,430 188:472 103:611 103,704 103:778 160:899 262:984 403:1030;803,-55 803:-17 761:29 689:54 595:66 491:71 383:77 334,85 277:58 206:-20 206,-74 206:-108 241:-167 313:-210 422:-235 496,-235 568:-235 682:-209 761:-161 803:-95;487,495 541:495 624:525 680:579 708:654 708,699 708:792 595:902 487,902 380:902 267:792 267,699 267:654 296:579 352:525 434:495"),  # U+0067 g
    0x68: (1112, "146,0 146,1473 324,1473 324,877 389:946 547:1029 650,1029 733:1029 860:974 945:873 989:731 989,645 989,0 811,0 811,645 811:760 706:887 598,887 519:887 382:811 324,746 324,0"),  # U+0068 h
    0x69: (512, "344,1013 344,0 166,0 166,1013;384,1331 384:1305 363:1260 328:1225 282:1205 256,1205 230:1205 185:1225 150:1260 130:1305 130,1331 130:1357 150:1404 185:1439 230:1459 256,1459 282:1459 328:1439 363:1404 384:1357"),  # U+0069 i
    0x6a: (508, "344,1013 344,-75 344:-136 312:-241 243:-319 134:-364 58,-364 25:-364 -29:-354 -56,-344 -48,-248 -46:-235 -32:-228 -17,-228 -9:-228 9:-229 22,-229 100:-229 166:-156 166,-75 166,1013;384,1331 384:1305 363:1260 328:1225 282:1205 256,1205 230:1205 185:1225 150:1260 130:1305 130,1331 130:1357 150:1404 185:1439 230:1459 256,1459 282:1459 328:1439 363:1404 384:1357"),  # U+006A j
    0x6b: (1048, "331,1473 331,606 377,606 397:606 423:617 439,634 759,977 774:993 804:1013 829,1013 991,1013 618,616 604:599 577:573 560,563 578:551 607:520 620,500 1016,0 856,0 834:0 803:17 789,35 456,450 441:471 411:484 381,484 331,484 331,0 152,0 152,1473"),  # U+006B k
    0x6c: (512, "344,1473 344,0 166,0 166,1473"),  # U+006C l
    0x6d: (1642, "146,0 146,1013 252,1013 290:1013 300,976 313,872 369:941 508:1029 600,1029 703:1029 830:915 858,818 879:873 948:953 1034:1005 1131:1029 1181,1029 1261:1029 1386:978 1473:880 1519:737 1519,645 1519,0 1341,0 1341,645 1341:764 1237:887 1138,887 1094:887 1015:856 955:796 920:705 920,645 920,0 742,0 742,645 742:767 644:887 550,887 484:887 371:816 324,755 324,0"),  # U+006D m
    0x6e: (1112, "146,0 146,1013 252,1013 290:1013 300,976 314,866 380:939 543:1029 650,1029 733:1029 860:974 945:873 989:731 989,645 989,0 811,0 811,645 811:760 706:887 598,887 519:887 382:811 324,746 324,0"),  # U+006E n
    0x6f: (1112, "556,1029 667:1029 846:955 971:819 1038:626 1038,507 1038:387 971:195 846:59 667:-14 556,-14 445:-14 266:59 140:195 72:387 72,507 72:626 140:819 266:955 445:1029;556,125 706:125 854:326 854,506 854:687 706:889 556,889 480:889 368:837 293:739 256:596 256,506 256:416 293:274 368:177 480:125"),  # U+006F o
    0x70: (1104, "146,-343 146,1013 252,1013 290:1013 300,976 315,856 380:935 547:1031 656,1031 743:1031 885:964 985:833 1039:639 1039,513 1039:401 979:208 867:67 704:-14 602,-14 508:-14 375:48 324,105 324,-343;597,887 510:887 379:807 324,734 324,244 373:178 490:124 562,124 703:124 855:326 855,513 855:612 820:754 754:845 658:887"),  # U+0070 p
    0x71: (1118, "965,1013 965,-343 787,-343 787,150 723:76 560:-14 455,-14 368:-14 226:53 126:183 72:377 72,503 72:615 132:808 245:950 407:1031 510,1031 608:1031 745:961 799,897 811,976 821:1013 859,1013;514,130 601:130 732:210 787,283 787,773 739:837 621:892 550,892 408:892 256:690 256,503 256:404 290:263 356:172 452:130"),  # U+0071 q
    0x72: (806, "146,0 146,1013 248,1013 277:1013 299:991 303,964 315,806 367:912 520:1031 623,1031 665:1031 733:1012 762,995 739,862 732:837 708,837 694:837 636:856 584,856 491:856 366:748 324,645 324,0"),  # U+0072 r
    0x73: (868, "726,846 714:824 689,824 674:824 636:846 581:873 505:896 453,896 408:896 336:873 285:833 258:780 258,749 258:710 303:658 377:620 471:591 570:558 664:518 738:458 783:371 783,310 783:240 733:121 635:34 493:-16 400,-16 294:-16 122:53 62,107 104,175 112:188 134:202 152,202 170:202 210:174 267:140 348:112 409,112 461:112 539:139 591:185 616:245 616,279 616:321 571:376 497:415 402:444 303:476 208:517 134:579 89:670 89,735 89:793 137:900 229:981 363:1029 449,1029 549:1029 708:966 766,911"),  # U+0073 s
    0x74: (746, "453,-16 333:-16 204:118 204,244 204,864 82,864 66:864 44:883 44,903 44,974 210,995 251,1308 253:1323 275:1342 292,1342 382,1342 382,993 672,993 672,864 382,864 382,256 382:192 444:130 493,130 521:130 562:145 592:163 613:178 621,178 635:178 646,161 698,76 652:33 522:-16"),  # U+0074 t
    0x75: (1112, "300,1013 300,367 300:252 406:126 513,126 591:126 729:200 787,266 787,1013 965,1013 965,0 859,0 821:0 811,37 797,146 731:73 567:-16 461,-16 378:-16 251:39 165:139 122:281 122,367 122,1013"),  # U+0075 u
    0x76: (1024, "18,1013 164,1013 185:1013 213:991 219,976 476,324 490:288 506:216 513,181 521:216 539:288 553,324 813,976 819:992 846:1013 866,1013 1005,1013 592,0 431,0"),  # U+0076 v
    0x77: (1532, "14,1013 154,1013 176:1013 204:991 209,976 403,324 411:288 425:221 430,187 438:221 458:288 469,324 683,980 688:995 713:1015 732,1015 809,1015 829:1015 855:995 860,980 1069,324 1080:289 1097:221 1105,188 1110:221 1126:293 1135,324 1333,976 1338:992 1366:1013 1385,1013 1519,1013 1191,0 1050,0 1024:0 1014,34 790,721 782:744 772:791 767,814 762:791 752:743 744,720 517,34 506:0 476,0 342,0"),  # U+0077 w
    0x78: (1008, "383,519 42,1013 213,1013 235:1013 255:999 263,986 511,606 520:634 537,662 755,982 765:996 785:1013 800,1013 964,1013 623,529 978,0 807,0 785:0 760:23 752,37 497,434 490:405 476,382 240,37 230:23 207:0 187,0 28,0"),  # U+0078 x
    0x79: (1024, "443,-299 434:-319 407:-343 379,-343 247,-343 432,59 14,1013 168,1013 191:1013 217:990 223,976 494,338 503:316 516:272 521,249 528:272 542:316 551,339 814,976 820:992 849:1013 866,1013 1008,1013"),  # U+0079 y
    0x7a: (924, "853,937 853:918 839:883 828,869 280,139 833,139 833,0 70,0 70,74 70:87 83:122 95,138 646,873 101,873 101,1013 853,1013"),  # U+007A z
    0x7b: (600, "181,425 181:488 111:569 44,569 44,676 111:676 181:756 181,820 181:870 165:968 146:1066 130:1166 130,1218 130:1287 171:1403 254:1487 377:1533 459,1533 512,1533 512,1454 512:1434 484:1416 472,1416 452,1416 375:1416 286:1315 286,1229 286:1173 300:1069 318:970 332:872 332,822 332:784 310:719 269:668 214:631 181,622 214:613 269:576 310:524 332:460 332,423 332:373 318:275 300:176 286:72 286,16 286:-71 375:-171 452,-171 472,-171 484:-171 512:-189 512,-209 512,-289 459,-289 377:-289 254:-242 171:-158 130:-42 130,27 130:79 146:178 165:277 181:375"),  # U+007B {
    0x7c: (600, "230,1533 368,1533 368,-343 230,-343"),  # U+007C |
    0x7d: (600, "419,425 419:375 435:277 454:178 470:79 470,27 470:-42 428:-158 346:-242 223:-289 141,-289 88,-289 88,-209 88:-189 116:-171 128,-171 148,-171 225:-171 314:-71 314,16 314:72 300:176 282:275 268:373 268,423 268:460 290:524 331:576 386:613 419,622 386:631 331:668 290:719 268:784 268,822 268:872 282:970 300:1069 314:1173 314,1229 314:1315 225:1416 148,1416 128,1416 116:1416 88:1434 88,1454 88,1533 141,1533 223:1533 346:1487 428:1403 470:1287 470,1218 470:1166 454:1066 435:968 419:870 419,820 419:756 489:676 556,676 556,569 489:569 419:488"),  # U+007D }
    0x7e: (1160, "759,613 824:613 897:698 898,768 1042,768 1042:701 1005:589 936:509 834:465 770,465 718:465 616:497 521:536 435:569 399,569 334:569 261:485 260,414 116,414 116:481 153:593 222:673 323:718 388,718 440:718 542:685 637:646 723:613"),  # U+007E ~
    0xa0: (386, ""),  # U+00A0
    0xa1: (686, "262,-343 262,198 262:243 265:328 271:415 280:507 286,559 407,559 413:507 422:415 428:328 431:243 431,198 431,-343;218,904 218:931 237:976 271:1010 316:1029 343,1029 369:1029 414:1010 448:976 468:931 468,904 468:878 448:832 414:798 369:778 343,778 316:778 271:798 237:832 218:878"),  # U+00A1 ¡
    0xa2: (1160, "561,-11 469:-1 314:78 201:210 138:392 138,506 138:617 204:804 330:942 514:1023 633,1026 645,1205 647:1225 674:1254 695,1254 761,1254 745,1021 827:1009 959:946 1013,897 967,835 959:824 944:813 930,813 918:813 885:830 840:854 777:878 735,885 683,123 746:127 831:158 890:192 928:220 944,220 955:220 973:211 978,204 1026,141 966:69 781:-5 674,-12 662,-187 660:-206 633:-235 612,-235 546,-235;315,506 315:344 450:152 571,129 623,889 547:883 432:826 354:727 315:591"),  # U+00A2 ¢
    0xa3: (1160, "52,672 52:698 84:734 113,734 247,734 247,995 247:1089 301:1254 411:1377 575:1448 685,1448 763:1448 884:1409 978:1341 1047:1251 1071,1199 999,1153 989:1147 968:1142 958,1142 944:1142 919:1153 908,1167 888:1192 847:1239 796:1274 730:1295 685,1295 622:1295 526:1253 462:1175 430:1065 430,997 430,734 871,734 871,662 871:644 841:614 819,614 430,614 430,371 430:296 373:187 323,142 352:147 409:154 439,154 1115,154 1115,78 1115:64 1104:37 1084:14 1056:0 1038,0 74,0 74,115 108:125 170:159 218:210 247:279 247,325 247,614 52,614"),  # U+00A3 £
    0xa4: (1160, "223,672 223:729 256:830 285,874 132,1027 223,1117 374,965 418:996 522:1030 580,1030 637:1030 739:997 782,967 935,1120 1024,1029 873,877 904:833 938:730 938,672 938:615 905:513 876,470 1028,319 937,227 785,379 741:349 637:315 580,315 523:315 422:348 378,377 225,224 136,315 287,467 257:511 223:614;355,672 355:626 390:545 452:484 533:448 580,448 627:448 710:484 771:545 807:626 807,672 807:719 771:801 710:863 627:898 580,898 533:898 452:863 390:801 355:719"),  # U+00A4 ¤
    0xa5: (1160, "146,625 452,625 44,1433 193,1433 219:1433 250:1408 260,1388 536,822 550:787 570:729 577,700 584:729 602:788 616,822 891,1388 899:1405 932:1433 957,1433 1107,1433 698,625 1005,625 1005,523 665,523 665,418 1005,418 1005,315 665,315 665,0 486,0 486,315 146,315 146,418 486,418 486,523 146,523"),  # U+00A5 ¥
    0xa6: (600, "230,1533 368,1533 368,739 230,739;230,452 368,452 368,-343 230,-343"),  # U+00A6 ¦
    0xa7: (1006, "817,1265 805:1243 780,1243 765:1243 727:1265 672:1292 596:1315 544,1315 496:1315 419:1290 366:1248 338:1192 338,1161 338:1123 387:1066 466:1019 568:976 673:930 775:875 854:804 903:712 903,651 903:570 825:443 741,405 790:368 852:270 852,201 852:131 802:12 705:-75 562:-125 470,-125 364:-125 192:-56 132,-2 173,66 181:79 204:93 221,93 239:93 279:65 337:30 422:2 485,2 535:2 614:27 668:72 696:134 696,172 696:217 646:283 564:334 460:376 350:420 246:471 164:541 114:634 114,698 114:776 200:901 293,936 243:974 180:1079 180,1154 180:1212 228:1319 320:1399 454:1447 540,1447 640:1447 799:1385 857,1330;272,726 272:675 342:604 451:547 583:494 645,463 699:489 747:564 747,611 747:647 717:703 665:749 595:787 516:822 432:857 392,877 326:847 272:774"),  # U+00A7 §
    0xa8: (614, "239,1289 239:1266 221:1226 189:1196 148:1178 125,1178 103:1178 63:1196 32:1226 14:1266 14,1289 14:1312 32:1354 63:1385 103:1403 125,1403 148:1403 189:1385 221:1354 239:1312;598,1289 598:1266 580:1226 549:1196 508:1178 485,1178 462:1178 421:1196 391:1226 373:1266 373,1289 373:1312 391:1354 421:1385 462:1403 485,1403 508:1403 549:1385 580:1354 598:1312"),  # U+00A8 ¨
    0xa9: (1596, "1030,463 1038:468 1049:475 1055,475 1066:475 1074:469 1080,463 1141,399 1084:333 918:260 802,260 704:260 543:328 428:450 365:618 365,718 365:819 434:988 556:1109 723:1176 821,1176 929:1176 1081:1108 1138,1053 1092,988 1087:982 1071:970 1059,970 1045:970 1014:992 964:1019 888:1042 829,1042 759:1042 646:997 567:913 524:793 524,718 524:641 567:520 643:438 749:395 811,395 859:395 925:407 973:427 1010:451;68,716 68:817 120:1004 215:1167 349:1300 511:1396 697:1448 798,1448 899:1448 1086:1396 1248:1300 1382:1167 1477:1004 1529:817 1529,716 1529:616 1477:429 1382:267 1248:134 1086:38 899:-14 798,-14 697:-14 511:38 349:134 215:267 120:429 68:615;168,716 168:627 212:463 294:320 408:204 548:121 710:76 798,76 930:76 1161:176 1332:349 1431:582 1431,716 1431:805 1386:971 1304:1114 1189:1232 1049:1315 886:1361 798,1361 666:1361 436:1260 266:1085 168:850"),  # U+00A9 ©
    0xaa: (684, "596,840 536,840 518:840 500:851 492,869 480,918 456:897 410:865 360:842 304:831 270,831 232:831 167:851 119:892 92:952 92,993 92:1027 130:1094 218:1147 363:1182 470,1184 470,1221 470:1284 412:1344 355,1344 317:1344 267:1326 230:1305 201:1288 185,1288 171:1288 151:1303 146,1313 124,1355 176:1404 297:1450 370,1450 424:1450 508:1416 566:1356 596:1272 596,1221;309,923 360:923 434:961 470,996 470,1101 400:1099 303:1082 243:1055 217:1020 217,999 217:957 269:923"),  # U+00AA ª
    0xab: (926, "138,518 138,541 387,930 445,902 459:895 473:873 473,860 473:843 463,827 304,566 290:542 276,529 291:515 304,493 463,232 468:224 473:206 473,198 473:170 445,157 387,129;434,518 434,541 683,930 741,902 755:895 769:873 769,860 769:843 759,827 600,566 586:542 572,529 587:515 600,493 759,232 764:224 769:206 769,198 769:170 741,157 683,129"),  # U+00AB «
    0xac: (1160, "148,739 1008,739 1008,315 857,315 857,604 148,604"),  # U+00AC ¬
    0xad: (694, "100,675 594,675 594,524 100,524"),  # U+00AD
    0xae: (1596, "68,716 68:817 120:1004 215:1167 349:1300 511:1396 697:1448 798,1448 899:1448 1086:1396 1248:1300 1382:1167 1477:1004 1529:817 1529,716 1529:616 1477:429 1382:267 1248:134 1086:38 899:-14 798,-14 697:-14 511:38 349:134 215:267 120:429 68:615;168,716 168:627 212:463 294:320 408:204 548:121 710:76 798,76 930:76 1161:176 1332:349 1431:582 1431,716 1431:805 1386:971 1304:1114 1189:1232 1049:1315 886:1361 798,1361 666:1361 436:1260 266:1085 168:850;654,626 654,272 498,272 498,1164 786,1164 958:1164 1124:1039 1124,917 1124:823 1017:691 911,666 928:656 953:626 964,606 1192,272 1044,272 1011:272 995,297 794,599 785:612 760:626 734,626;654,740 770,740 825:740 902:761 949:801 970:859 970,897 970:934 951:990 908:1026 838:1044 786,1044 654,1044"),  # U+00AE ®
    0xaf: (614, "20,1348 594,1348 594,1231 20,1231"),  # U+00AF ¯
    0xb0: (794, "70,1128 70:1195 120:1313 208:1400 327:1450 396,1450 465:1450 584:1400 672:1313 722:1195 722,1128 722:1062 672:945 584:858 465:807 396,807 327:807 208:858 120:945 70:1062;197,1127 197:1085 227:1012 281:958 354:927 396,927 438:927 510:958 564:1012 594:1085 594,1127 594:1169 564:1243 510:1298 438:1329 396,1329 354:1329 281:1298 227:1243 197:1169"),  # U+00B0 °
    0xb1: (1160, "651,1202 651,826 1058,826 1058,690 651,690 651,322 505,322 505,690 100,690 100,826 505,826 505,1202;100,215 1058,215 1058,80 100,80"),  # U+00B1 ±
    0xb2: (664, "346,1637 398:1637 483:1607 543:1553 576:1476 576,1429 576:1389 551:1320 509:1258 455:1200 425,1170 263,1005 286:1011 333:1019 354,1019 549,1019 570:1019 593:997 593,977 593,900 82,900 82,943 82:956 92:984 104,996 325,1215 350:1240 394:1292 426:1345 445:1398 445,1425 445:1476 385:1531 340,1531 294:1531 237:1483 223,1441 215:1427 196:1411 179,1411 175:1411 166:1412 161,1413 90,1425 105:1531 243:1637"),  # U+00B2 ²
    0xb3: (664, "354,1637 405:1637 487:1608 546:1557 578:1489 578,1449 578:1321 459,1276 525:1257 594:1179 594,1117 594:1062 552:978 483:921 392:892 344,892 287:892 203:917 142:966 99:1038 84,1085 139,1109 154:1115 168,1115 197:1115 208,1092 214:1079 232:1047 262:1019 305:1000 337,1000 368:1000 415:1020 447:1051 463:1091 463,1112 463:1142 446:1185 407:1213 342:1227 295,1227 295,1314 382:1315 453:1375 453,1427 453:1477 395:1529 347,1529 299:1529 242:1482 230,1442 222:1426 205:1411 190,1411 186:1411 177:1412 172,1413 105,1425 112:1478 156:1557 221:1610 305:1637"),  # U+00B3 ³
    0xb4: (614, "597,1449 364,1191 350:1176 323:1163 302,1163 196,1163 344,1405 358:1428 391:1449 423,1449"),  # U+00B4 ´
    0xb5: (1112, "300,1013 300,355 300:246 408:126 513,126 591:126 729:200 787,266 787,1013 965,1013 965,0 859,0 821:0 811,37 797,146 730:74 589:6 502,6 428:6 316:57 277,103 284:61 290:-26 290,-64 290,-343 201,-343 163:-343 122:-303 122,-267 122,1013"),  # U+00B5 µ
    0xb6: (1338, "1302,1433 1302,1280 1083,1280 1083,-201 926,-201 926,1280 649,1280 649,-201 492,-201 492,660 388:660 222:721 105:826 42:968 42,1049 42:1135 105:1276 222:1377 388:1433 492,1433"),  # U+00B6 ¶
    0xb7: (546, "124,593 124:624 147:680 188:720 242:744 272,744 303:744 359:720 399:680 423:624 423,593 423:563 399:509 359:468 303:445 272,445 242:445 188:468 147:509 124:563"),  # U+00B7 ·
    0xb8: (614, "172,-247 178:-247 194:-254 216:-263 248:-270 269,-270 311:-270 354:-237 354,-211 354:-192 332:-166 291:-148 231:-136 193,-131 236,10 348,10 324,-70 414:-90 495:-159 495,-213 495:-245 463:-296 406:-332 326:-351 278,-351 237:-351 163:-334 132,-320 149,-265 155:-247"),  # U+00B8 ¸
    0xb9: (664, "173,985 320,985 320,1425 324,1468 217,1380 205:1371 191,1371 168:1371 159,1385 120,1441 342,1631 450,1631 450,985 580,985 580,900 173,900"),  # U+00B9 ¹
    0xba: (762, "382,1449 452:1449 565:1406 645:1326 689:1211 689,1140 689:1068 645:952 565:871 452:828 382,828 311:828 197:871 116:952 72:1068 72,1140 72:1211 116:1326 197:1406 311:1449;382,934 466:934 549:1039 549,1139 549:1239 466:1343 382,1343 295:1343 212:1239 212,1139 212:1039 295:934"),  # U+00BA º
    0xbb: (926, "236,129 178,157 150:170 150,198 150:215 160,232 319,493 332:517 346,529 334:540 319,566 160,827 150:844 150,861 150:889 178,902 236,930 485,541 485,518;781,541 781,518 532,129 474,157 446:170 446,198 446:215 456,232 615,493 628:517 642,529 630:540 615,566 456,827 446:844 446,861 446:889 474,902 532,930"),  # U+00BB »
    0xbc: (1424, "1295,267 1404,267 1404,202 1404:191 1390:176 1377,176 1295,176 1295,0 1186,0 1186,176 880,176 862:176 841:192 839,204 829,261 1171,729 1295,729;155,788 302,788 302,1228 306,1271 199,1183 187:1174 173,1174 150:1174 141,1188 102,1244 324,1434 432,1434 432,788 562,788 562,703 155,703;1186,508 1186:527 1188:571 1191,594 950,267 1186,267;434,53 415:22 371:0 342,0 266,0 1084,1372 1102:1401 1148:1433 1180,1433 1257,1433"),  # U+00BC ¼
    0xbd: (1424, "1126,737 1178:737 1263:707 1323:653 1356:576 1356,529 1356:489 1331:420 1289:358 1235:300 1205,270 1043,105 1066:111 1113:119 1134,119 1329,119 1350:119 1373:97 1373,77 1373,0 862,0 862,43 862:56 872:84 884,96 1105,315 1130:340 1174:392 1206:445 1225:498 1225,525 1225:576 1165:631 1120,631 1074:631 1017:583 1003,541 995:527 976:511 959,511 955:511 946:512 941,513 870,525 885:631 1023:737;155,788 302,788 302,1228 306,1271 199,1183 187:1174 173,1174 150:1174 141,1188 102,1244 324,1434 432,1434 432,788 562,788 562,703 155,703;390,53 371:22 327:0 298,0 222,0 1040,1372 1058:1401 1104:1433 1136,1433 1213,1433"),  # U+00BD ½
    0xbe: (1426, "1296,267 1405,267 1405,202 1405:191 1391:176 1378,176 1296,176 1296,0 1187,0 1187,176 881,176 863:176 842:192 840,204 830,261 1172,729 1296,729;338,1440 389:1440 471:1411 530:1360 562:1292 562,1252 562:1124 443,1079 509:1060 578:982 578,920 578:865 536:781 467:724 376:695 328,695 271:695 187:720 126:769 83:841 68,888 123,912 138:918 152,918 181:918 192,895 198:882 216:850 246:822 289:803 321,803 352:803 399:823 431:854 447:894 447,915 447:945 430:988 391:1016 326:1030 279,1030 279,1117 366:1118 437:1178 437,1230 437:1280 379:1332 331,1332 283:1332 226:1285 214,1245 206:1229 189:1214 174,1214 170:1214 161:1215 156,1216 89,1228 96:1281 140:1360 205:1413 289:1440;1187,508 1187:527 1189:571 1192,594 951,267 1187,267;439,53 420:22 376:0 347,0 271,0 1089,1372 1107:1401 1153:1433 1185,1433 1262,1433"),  # U+00BE ¾
    0xbf: (796, "770,-212 739:-241 664:-293 576:-333 472:-356 412,-356 333:-356 198:-312 100:-230 44:-112 44,-37 44:39 89:145 158:221 240:275 311:323 362:372 366,405 384,559 506,559 518,392 518,380 518:336 473:274 404:224 325:177 256:117 211:37 211,-22 211:-66 245:-135 303:-184 382:-210 427,-210 488:-210 575:-180 635:-144 673:-114 685,-114 699:-114 716:-126 723,-137;324,903 324:929 343:975 376:1009 422:1029 448,1029 474:1029 520:1009 554:975 573:929 573,903 573:876 554:831 520:797 474:778 448,778 422:778 376:797 343:831 324:876"),  # U+00BF ¿
    0xc0: (1360, "1353,0 1203,0 1177:0 1145:26 1137,46 1003,392 360,392 226,46 219:28 185:0 160,0 10,0 583,1433 780,1433;414,532 949,532 724,1115 702:1169 681,1250 670:1209 649:1140 639,1114;520,1782 552:1782 584:1769 604,1749 815,1546 676,1546 655:1546 631:1553 614,1565 319,1782"),  # U+00C0 À
    0xc1: (1360, "1353,0 1203,0 1177:0 1145:26 1137,46 1003,392 360,392 226,46 219:28 185:0 160,0 10,0 583,1433 780,1433;414,532 949,532 724,1115 702:1169 681,1250 670:1209 649:1140 639,1114;1021,1782 727,1566 710:1554 684:1546 663,1546 525,1546 736,1749 746:1759 763:1771 781:1779 803:1782 820,1782"),  # U+00C1 Á
    0xc2: (1360, "1353,0 1203,0 1177:0 1145:26 1137,46 1003,392 360,392 226,46 219:28 185:0 160,0 10,0 583,1433 780,1433;414,532 949,532 724,1115 702:1169 681,1250 670:1209 649:1140 639,1114;1006,1546 871,1546 859:1546 831:1553 822,1559 692,1654 684:1658 680,1662 672:1656 668,1654 538,1559 529:1553 501:1546 489,1546 354,1546 592,1756 768,1756"),  # U+00C2 Â
    0xc3: (1360, "1353,0 1203,0 1177:0 1145:26 1137,46 1003,392 360,392 226,46 219:28 185:0 160,0 10,0 583,1433 780,1433;414,532 949,532 724,1115 702:1169 681,1250 670:1209 649:1140 639,1114;801,1663 836:1663 873:1704 874,1741 972,1741 972:1698 950:1626 908:1573 846:1544 806,1544 771:1544 707:1570 648:1601 596:1627 572,1627 538:1627 501:1584 500,1548 400,1548 400:1591 423:1664 466:1716 529:1746 568,1746 603:1746 667:1720 725:1689 777:1663"),  # U+00C3 Ã
    0xc4: (1360, "1353,0 1203,0 1177:0 1145:26 1137,46 1003,392 360,392 226,46 219:28 185:0 160,0 10,0 583,1433 780,1433;414,532 949,532 724,1115 702:1169 681,1250 670:1209 649:1140 639,1114;578,1666 578:1644 560:1605 530:1575 489:1558 466,1558 445:1558 406:1575 376:1605 358:1644 358,1666 358:1689 376:1730 406:1760 445:1778 466,1778 489:1778 530:1760 560:1730 578:1689;1004,1666 1004:1644 986:1605 956:1575 916:1558 894,1558 871:1558 831:1575 801:1605 784:1644 784,1666 784:1689 801:1730 831:1760 871:1778 894,1778 916:1778 956:1760 986:1730 1004:1689"),  # U+00C4 Ä
    0xc5: (1360, "1353,0 1203,0 1177:0 1145:26 1137,46 1003,392 360,392 226,46 219:28 185:0 160,0 10,0 583,1433 780,1433;414,532 949,532 724,1115 702:1169 681,1250 670:1209 649:1140 639,1114;489,1659 489:1698 520:1764 571:1811 639:1837 677,1837 716:1837 785:1811 838:1764 868:1698 868,1659 868:1621 838:1557 785:1511 716:1485 677,1485 639:1485 571:1511 520:1557 489:1621;578,1659 578:1616 632:1559 679,1559 724:1559 779:1616 779,1659 779:1704 724:1760 679,1760 632:1760 578:1704"),  # U+00C5 Å
    0xc6: (1858, "733,1433 1754,1433 1754,1275 1005,1275 1065,799 1624,799 1624,647 1084,647 1145,158 1754,158 1754,0 982,0 933,392 377,392 198,45 187:25 150:0 124,0 -24,0;450,532 915,532 821,1285 809:1244 780:1175 766,1144"),  # U+00C6 Æ
    0xc7: (1370, "643,-247 649:-247 665:-254 687:-263 719:-270 740,-270 782:-270 825:-237 825,-211 825:-192 803:-166 762:-148 702:-136 664,-131 700,-13 561:-1 335:116 176:307 90:563 90,716 90:878 195:1148 385:1342 650:1449 810,1449 968:1449 1197:1351 1286,1267 1223,1178 1216:1168 1198:1155 1181,1155 1168:1155 1139:1174 1099:1202 1045:1234 971:1262 873:1281 809,1281 694:1281 503:1202 365:1056 288:846 288,716 288:582 365:372 498:227 680:151 785,151 849:151 951:166 1038:198 1113:247 1151,281 1168:296 1184,296 1200:296 1213,283 1289,200 1206:103 973:-9 811,-15 795,-70 885:-90 966:-159 966,-213 966:-245 934:-296 877:-332 797:-351 749,-351 708:-351 634:-334 603,-320 620,-265 626:-247"),  # U+00C7 Ç
    0xc8: (1162, "1057,1433 1057,1275 369,1275 369,799 926,799 926,647 369,647 369,158 1057,158 1057,0 174,0 174,1433;468,1782 500:1782 532:1769 552,1749 763,1546 624,1546 603:1546 579:1553 562,1565 267,1782"),  # U+00C8 È
    0xc9: (1162, "1057,1433 1057,1275 369,1275 369,799 926,799 926,647 369,647 369,158 1057,158 1057,0 174,0 174,1433;969,1782 675,1566 658:1554 632:1546 611,1546 473,1546 684,1749 694:1759 711:1771 729:1779 751:1782 768,1782"),  # U+00C9 É
    0xca: (1162, "1057,1433 1057,1275 369,1275 369,799 926,799 926,647 369,647 369,158 1057,158 1057,0 174,0 174,1433;954,1546 819,1546 807:1546 779:1553 770,1559 640,1654 632:1658 628,1662 620:1656 616,1654 486,1559 477:1553 449:1546 437,1546 302,1546 540,1756 716,1756"),  # U+00CA Ê
    0xcb: (1162, "1057,1433 1057,1275 369,1275 369,799 926,799 926,647 369,647 369,158 1057,158 1057,0 174,0 174,1433;526,1666 526:1644 508:1605 478:1575 437:1558 414,1558 393:1558 354:1575 324:1605 306:1644 306,1666 306:1689 324:1730 354:1760 393:1778 414,1778 437:1778 478:1760 508:1730 526:1689;952,1666 952:1644 934:1605 904:1575 864:1558 842,1558 819:1558 779:1575 749:1605 732:1644 732,1666 732:1689 749:1730 779:1760 819:1778 842,1778 864:1778 904:1760 934:1730 952:1689"),  # U+00CB Ë
    0xcc: (614, "404,0 210,0 210,1433 404,1433;149,1782 181:1782 213:1769 233,1749 444,1546 305,1546 284:1546 260:1553 243,1565 -52,1782"),  # U+00CC Ì
    0xcd: (614, "404,0 210,0 210,1433 404,1433;650,1782 356,1566 339:1554 313:1546 292,1546 154,1546 365,1749 375:1759 392:1771 410:1779 432:1782 449,1782"),  # U+00CD Í
    0xce: (614, "404,0 210,0 210,1433 404,1433;635,1546 500,1546 488:1546 460:1553 451,1559 321,1654 313:1658 309,1662 301:1656 297,1654 167,1559 158:1553 130:1546 118,1546 -17,1546 221,1756 397,1756"),  # U+00CE Î
    0xcf: (614, "404,0 210,0 210,1433 404,1433;206,1666 206:1644 188:1605 158:1575 117:1558 94,1558 73:1558 34:1575 4:1605 -14:1644 -14,1666 -14:1689 4:1730 34:1760 73:1778 94,1778 117:1778 158:1760 188:1730 206:1689;632,1666 632:1644 614:1605 584:1575 544:1558 522,1558 499:1558 459:1575 429:1605 412:1644 412,1666 412:1689 429:1730 459:1760 499:1778 522,1778 544:1778 584:1760 614:1730 632:1689"),  # U+00CF Ï
    0xd0: (1578, "50,780 247,780 247,1433 782,1433 940:1433 1201:1330 1387:1141 1489:877 1489,716 1489:555 1387:291 1201:103 940:0 782,0 247,0 247,666 50,666;1290,716 1290:848 1218:1056 1086:1200 898:1276 782,1276 441,1276 441,780 822,780 822,666 441,666 441,157 782,157 898:157 1086:233 1218:376 1290:584"),  # U+00D0 Ð
    0xd1: (1512, "274,1433 300:1433 325:1420 341,1400 1171,320 1168:346 1166:395 1166,418 1166,1433 1336,1433 1336,0 1238,0 1215:0 1184:16 1169,35 340,1114 342:1089 344:1041 344,1021 344,0 174,0 174,1433 274,1433;901,1663 936:1663 973:1704 974,1741 1072,1741 1072:1698 1050:1626 1008:1573 946:1544 906,1544 871:1544 807:1570 748:1601 696:1627 672,1627 638:1627 601:1584 600,1548 500,1548 500:1591 523:1664 566:1716 629:1746 668,1746 703:1746 767:1720 825:1689 877:1663"),  # U+00D1 Ñ
    0xd2: (1596, "1505,716 1505:555 1403:286 1217:92 956:-15 798,-15 640:-15 380:92 194:286 92:555 92,716 92:877 194:1146 380:1341 640:1449 798,1449 956:1449 1217:1341 1403:1146 1505:877;1306,716 1306:848 1234:1058 1102:1203 914:1281 798,1281 683:1281 495:1203 362:1058 290:848 290,716 290:584 362:375 495:230 683:153 798,153 914:153 1102:230 1234:375 1306:584;640,1782 672:1782 704:1769 724,1749 935,1546 796,1546 775:1546 751:1553 734,1565 439,1782"),  # U+00D2 Ò
    0xd3: (1596, "1505,716 1505:555 1403:286 1217:92 956:-15 798,-15 640:-15 380:92 194:286 92:555 92,716 92:877 194:1146 380:1341 640:1449 798,1449 956:1449 1217:1341 1403:1146 1505:877;1306,716 1306:848 1234:1058 1102:1203 914:1281 798,1281 683:1281 495:1203 362:1058 290:848 290,716 290:584 362:375 495:230 683:153 798,153 914:153 1102:230 1234:375 1306:584;1141,1782 847,1566 830:1554 804:1546 783,1546 645,1546 856,1749 866:1759 883:1771 901:1779 923:1782 940,1782"),  # U+00D3 Ó
    0xd4: (1596, "1505,716 1505:555 1403:286 1217:92 956:-15 798,-15 640:-15 380:92 194:286 92:555 92,716 92:877 194:1146 380:1341 640:1449 798,1449 956:1449 1217:1341 1403:1146 1505:877;1306,716 1306:848 1234:1058 1102:1203 914:1281 798,1281 683:1281 495:1203 362:1058 290:848 290,716 290:584 362:375 495:230 683:153 798,153 914:153 1102:230 1234:375 1306:584;1126,1546 991,1546 979:1546 951:1553 942,1559 812,1654 804:1658 800,1662 792:1656 788,1654 658,1559 649:1553 621:1546 609,1546 474,1546 712,1756 888,1756"),  # U+00D4 Ô
    0xd5: (1596, "1505,716 1505:555 1403:286 1217:92 956:-15 798,-15 640:-15 380:92 194:286 92:555 92,716 92:877 194:1146 380:1341 640:1449 798,1449 956:1449 1217:1341 1403:1146 1505:877;1306,716 1306:848 1234:1058 1102:1203 914:1281 798,1281 683:1281 495:1203 362:1058 290:848 290,716 290:584 362:375 495:230 683:153 798,153 914:153 1102:230 1234:375 1306:584;921,1663 956:1663 993:1704 994,1741 1092,1741 1092:1698 1070:1626 1028:1573 966:1544 926,1544 891:1544 827:1570 768:1601 716:1627 692,1627 658:1627 621:1584 620,1548 520,1548 520:1591 543:1664 586:1716 649:1746 688,1746 723:1746 787:1720 845:1689 897:1663"),  # U+00D5 Õ
    0xd6: (1596, "1505,716 1505:555 1403:286 1217:92 956:-15 798,-15 640:-15 380:92 194:286 92:555 92,716 92:877 194:1146 380:1341 640:1449 798,1449 956:1449 1217:1341 1403:1146 1505:877;1306,716 1306:848 1234:1058 1102:1203 914:1281 798,1281 683:1281 495:1203 362:1058 290:848 290,716 290:584 362:375 495:230 683:153 798,153 914:153 1102:230 1234:375 1306:584;698,1666 698:1644 680:1605 650:1575 609:1558 586,1558 565:1558 526:1575 496:1605 478:1644 478,1666 478:1689 496:1730 526:1760 565:1778 586,1778 609:1778 650:1760 680:1730 698:1689;1124,1666 1124:1644 1106:1605 1076:1575 1036:1558 1014,1558 991:1558 951:1575 921:1605 904:1644 904,1666 904:1689 921:1730 951:1760 991:1778 1014,1778 1036:1778 1076:1760 1106:1730 1124:1689"),  # U+00D6 Ö
    0xd7: (1160, "1017,1014 673,670 1027,317 932,221 578,575 221,219 126,315 482,671 137,1016 232,1112 577,766 921,1110"),  # U+00D7 ×
    0xd8: (1596, "1505,716 1505:555 1403:286 1217:92 956:-15 798,-15 690:-15 502:34 423,82 323,-54 301:-83 243:-109 214,-109 136,-109 327,151 215:249 92:537 92,716 92:877 194:1146 380:1341 640:1449 798,1449 913:1449 1113:1391 1196,1337 1278,1448 1298:1475 1330:1498 1362,1498 1462,1498 1290,1263 1393:1165 1505:887;290,716 290:581 365:370 434,297 1093,1196 1033:1238 885:1281 798,1281 683:1281 495:1203 362:1058 290:848;1306,716 1306:842 1241:1043 1181,1115 526,223 642:153 798,153 914:153 1102:230 1234:375 1306:584"),  # U+00D8 Ø
    0xd9: (1460, "731,154 820:154 960:214 1057:322 1108:472 1108,562 1108,1433 1301,1433 1301,562 1301:438 1222:226 1075:71 863:-17 731,-17 599:-17 387:71 239:226 160:438 160,562 160,1433 353,1433 353,563 353:473 404:323 501:215 642:154;570,1782 602:1782 634:1769 654,1749 865,1546 726,1546 705:1546 681:1553 664,1565 369,1782"),  # U+00D9 Ù
    0xda: (1460, "731,154 820:154 960:214 1057:322 1108:472 1108,562 1108,1433 1301,1433 1301,562 1301:438 1222:226 1075:71 863:-17 731,-17 599:-17 387:71 239:226 160:438 160,562 160,1433 353,1433 353,563 353:473 404:323 501:215 642:154;1071,1782 777,1566 760:1554 734:1546 713,1546 575,1546 786,1749 796:1759 813:1771 831:1779 853:1782 870,1782"),  # U+00DA Ú
    0xdb: (1460, "731,154 820:154 960:214 1057:322 1108:472 1108,562 1108,1433 1301,1433 1301,562 1301:438 1222:226 1075:71 863:-17 731,-17 599:-17 387:71 239:226 160:438 160,562 160,1433 353,1433 353,563 353:473 404:323 501:215 642:154;1056,1546 921,1546 909:1546 881:1553 872,1559 742,1654 734:1658 730,1662 722:1656 718,1654 588,1559 579:1553 551:1546 539,1546 404,1546 642,1756 818,1756"),  # U+00DB Û
    0xdc: (1460, "731,154 820:154 960:214 1057:322 1108:472 1108,562 1108,1433 1301,1433 1301,562 1301:438 1222:226 1075:71 863:-17 731,-17 599:-17 387:71 239:226 160:438 160,562 160,1433 353,1433 353,563 353:473 404:323 501:215 642:154;628,1666 628:1644 610:1605 580:1575 539:1558 516,1558 495:1558 456:1575 426:1605 408:1644 408,1666 408:1689 426:1730 456:1760 495:1778 516,1778 539:1778 580:1760 610:1730 628:1689;1054,1666 1054:1644 1036:1605 1006:1575 966:1558 944,1558 921:1558 881:1575 851:1605 834:1644 834,1666 834:1689 851:1730 881:1760 921:1778 944,1778 966:1778 1006:1760 1036:1730 1054:1689"),  # U+00DC Ü
    0xdd: (1258, "726,570 726,0 533,0 533,570 8,1433 178,1433 204:1433 234:1407 245,1388 573,831 593:796 620:734 631,704 642:735 668:797 688,831 1015,1388 1024:1404 1055:1433 1080,1433 1252,1433;971,1782 677,1566 660:1554 634:1546 613,1546 475,1546 686,1749 696:1759 713:1771 731:1779 753:1782 770,1782"),  # U+00DD Ý
    0xde: (1222, "387,272 387,0 194,0 194,1433 387,1433 387,1169 617,1169 753:1169 954:1106 1086:990 1151:826 1151,725 1151:625 1081:459 946:339 746:272 617,272;387,426 617,426 700:426 827:470 913:549 957:659 957,725 957:862 788:1016 617,1016 387,1016"),  # U+00DE Þ
    0xdf: (1218, "673,1454 776:1454 927:1394 1025:1301 1072:1191 1072,1140 1072:1080 1029:994 965:928 890:878 826:830 783:779 783,747 783:708 836:656 916:611 1009:564 1089:494 1142:392 1142,314 1142:236 1085:114 985:29 850:-16 771,-16 674:-16 516:53 456,107 497,175 505:188 528:202 545,202 563:202 603:174 658:140 733:112 786,112 830:112 900:139 949:185 975:249 975,286 975:342 919:412 835:463 737:505 653:563 597:646 597,712 597:765 642:844 709:907 787:961 854:1021 899:1092 899,1140 899:1172 874:1237 818:1289 729:1322 666,1322 598:1322 487:1280 408:1196 365:1070 365,986 365,0 186,0 186,992 186:1096 255:1266 383:1388 563:1454"),  # U+00DF ß
    0xe0: (1014, "890,0 811,0 785:0 753:16 748,42 728,136 688:100 612:43 528:4 433:-16 375,-16 316:-16 213:17 137:83 92:184 92,253 92:313 158:424 305:510 543:565 715,569 715,648 715:766 614:887 515,887 450:887 361:854 296:813 249:780 226,780 208:780 181:799 173,813 141,870 225:951 419:1031 537,1031 622:1031 754:975 844:875 890:733 890,648;428,109 475:109 553:128 622:163 685:213 715,245 715,456 592:452 420:421 312:371 263:303 263,261 263:221 289:163 333:126 393:109;428,1449 461:1449 493:1428 507,1405 656,1163 554,1163 533:1163 507:1176 493,1191 259,1449"),  # U+00E0 à
    0xe1: (1014, "890,0 811,0 785:0 753:16 748,42 728,136 688:100 612:43 528:4 433:-16 375,-16 316:-16 213:17 137:83 92:184 92,253 92:313 158:424 305:510 543:565 715,569 715,648 715:766 614:887 515,887 450:887 361:854 296:813 249:780 226,780 208:780 181:799 173,813 141,870 225:951 419:1031 537,1031 622:1031 754:975 844:875 890:733 890,648;428,109 475:109 553:128 622:163 685:213 715,245 715,456 592:452 420:421 312:371 263:303 263,261 263:221 289:163 333:126 393:109;818,1449 585,1191 571:1176 544:1163 523,1163 417,1163 565,1405 579:1428 612:1449 644,1449"),  # U+00E1 á
    0xe2: (1014, "890,0 811,0 785:0 753:16 748,42 728,136 688:100 612:43 528:4 433:-16 375,-16 316:-16 213:17 137:83 92:184 92,253 92:313 158:424 305:510 543:565 715,569 715,648 715:766 614:887 515,887 450:887 361:854 296:813 249:780 226,780 208:780 181:799 173,813 141,870 225:951 419:1031 537,1031 622:1031 754:975 844:875 890:733 890,648;428,109 475:109 553:128 622:163 685:213 715,245 715,456 592:452 420:421 312:371 263:303 263,261 263:221 289:163 333:126 393:109;833,1169 714,1169 693:1169 674,1183 546,1309 529,1326 513,1309 384,1183 378:1178 356:1169 344,1169 221,1169 444,1433 610,1433"),  # U+00E2 â
    0xe3: (1014, "890,0 811,0 785:0 753:16 748,42 728,136 688:100 612:43 528:4 433:-16 375,-16 316:-16 213:17 137:83 92:184 92,253 92:313 158:424 305:510 543:565 715,569 715,648 715:766 614:887 515,887 450:887 361:854 296:813 249:780 226,780 208:780 181:799 173,813 141,870 225:951 419:1031 537,1031 622:1031 754:975 844:875 890:733 890,648;428,109 475:109 553:128 622:163 685:213 715,245 715,456 592:452 420:421 312:371 263:303 263,261 263:221 289:163 333:126 393:109;638,1325 674:1325 713:1367 714,1411 822,1411 822:1364 797:1285 750:1229 685:1198 645,1198 610:1198 549:1227 495:1261 447:1290 424,1290 352:1290 350,1202 239,1202 239:1250 265:1329 313:1386 379:1417 418,1417 453:1417 514:1388 568:1354 615:1325"),  # U+00E3 ã
    0xe4: (1014, "890,0 811,0 785:0 753:16 748,42 728,136 688:100 612:43 528:4 433:-16 375,-16 316:-16 213:17 137:83 92:184 92,253 92:313 158:424 305:510 543:565 715,569 715,648 715:766 614:887 515,887 450:887 361:854 296:813 249:780 226,780 208:780 181:799 173,813 141,870 225:951 419:1031 537,1031 622:1031 754:975 844:875 890:733 890,648;428,109 475:109 553:128 622:163 685:213 715,245 715,456 592:452 420:421 312:371 263:303 263,261 263:221 289:163 333:126 393:109;460,1289 460:1266 442:1226 410:1196 369:1178 346,1178 324:1178 284:1196 253:1226 235:1266 235,1289 235:1312 253:1354 284:1385 324:1403 346,1403 369:1403 410:1385 442:1354 460:1312;819,1289 819:1266 801:1226 770:1196 729:1178 706,1178 683:1178 642:1196 612:1226 594:1266 594,1289 594:1312 612:1354 642:1385 683:1403 706,1403 729:1403 770:1385 801:1354 819:1312"),  # U+00E4 ä
    0xe5: (1014, "890,0 811,0 785:0 753:16 748,42 728,136 688:100 612:43 528:4 433:-16 375,-16 316:-16 213:17 137:83 92:184 92,253 92:313 158:424 305:510 543:565 715,569 715,648 715:766 614:887 515,887 450:887 361:854 296:813 249:780 226,780 208:780 181:799 173,813 141,870 225:951 419:1031 537,1031 622:1031 754:975 844:875 890:733 890,648;428,109 475:109 553:128 622:163 685:213 715,245 715,456 592:452 420:421 312:371 263:303 263,261 263:221 289:163 333:126 393:109;328,1315 328:1357 360:1425 415:1475 487:1502 527,1502 568:1502 641:1475 697:1425 729:1357 729,1315 729:1274 697:1206 641:1158 568:1131 527,1131 487:1131 415:1158 360:1206 328:1274;428,1315 428:1271 482:1215 529,1215 574:1215 629:1271 629,1315 629:1360 574:1416 529,1416 482:1416 428:1360"),  # U+00E5 å
    0xe6: (1632, "1166,1029 1248:1029 1389:965 1492:843 1551:668 1551,556 1551:515 1535:486 1510,486 883,486 887:395 933:260 1010:170 1115:126 1180,126 1249:126 1341:155 1402:191 1440:220 1456,220 1470:220 1488:211 1494,203 1541,142 1508:102 1421:43 1322:5 1216:-14 1164,-14 1047:-14 856:99 801,215 774:153 687:65 581:9 462:-16 403,-16 334:-16 220:19 137:89 92:195 92,267 92:327 158:443 305:535 543:594 715,598 715,648 715:766 614:892 515,892 450:892 361:857 296:815 249:780 226,780 208:780 181:799 173,813 141,870 225:951 406:1031 519,1031 639:1031 785:929 818,838 872:926 1045:1029;715,486 592:481 420:446 312:390 263:318 263,276 263:189 363:109 444,109 501:109 600:145 673:219 715:329 715,403;1159,898 1098:898 1002:857 933:779 892:667 885,597 1393,597 1393:662 1362:773 1302:853 1215:898"),  # U+00E6 æ
    0xe7: (934, "400,-247 406:-247 422:-254 444:-263 476:-270 497,-270 539:-270 582:-237 582,-211 582:-192 560:-166 519:-148 459:-136 421,-131 458,-10 375:1 234:80 132:212 74:394 74,507 74:620 137:812 258:951 436:1029 551,1029 657:1029 821:960 884,897 837,833 829:822 813:810 798,810 783:810 748:835 694:865 617:890 561,890 487:890 373:837 296:737 257:595 257,507 257:415 299:272 375:175 484:124 552,124 617:124 701:155 757:193 793:224 811,224 822:224 839:215 845,207 895,142 836:70 666:-4 569,-12 552,-70 642:-90 723:-159 723,-213 723:-245 691:-296 634:-332 554:-351 506,-351 465:-351 391:-334 360,-320 377,-265 383:-247"),  # U+00E7 ç
    0xe8: (1048, "547,1029 638:1029 792:968 904:853 967:684 967,576 967:534 949:506 924,506 250,506 252:410 300:268 384:173 500:126 572,126 639:126 736:157 806:193 853:224 870,224 892:224 904,207 954,142 921:102 829:43 724:5 612:-14 557,-14 452:-14 275:57 146:194 74:396 74,527 74:633 139:817 261:952 437:1029;551,898 422:898 274:749 256,617 807,617 807:679 773:782 707:857 612:898;451,1449 484:1449 516:1428 530,1405 679,1163 577,1163 556:1163 530:1176 516,1191 282,1449"),  # U+00E8 è
    0xe9: (1048, "547,1029 638:1029 792:968 904:853 967:684 967,576 967:534 949:506 924,506 250,506 252:410 300:268 384:173 500:126 572,126 639:126 736:157 806:193 853:224 870,224 892:224 904,207 954,142 921:102 829:43 724:5 612:-14 557,-14 452:-14 275:57 146:194 74:396 74,527 74:633 139:817 261:952 437:1029;551,898 422:898 274:749 256,617 807,617 807:679 773:782 707:857 612:898;841,1449 608,1191 594:1176 567:1163 546,1163 440,1163 588,1405 602:1428 635:1449 667,1449"),  # U+00E9 é
    0xea: (1048, "547,1029 638:1029 792:968 904:853 967:684 967,576 967:534 949:506 924,506 250,506 252:410 300:268 384:173 500:126 572,126 639:126 736:157 806:193 853:224 870,224 892:224 904,207 954,142 921:102 829:43 724:5 612:-14 557,-14 452:-14 275:57 146:194 74:396 74,527 74:633 139:817 261:952 437:1029;551,898 422:898 274:749 256,617 807,617 807:679 773:782 707:857 612:898;856,1169 737,1169 716:1169 697,1183 569,1309 552,1326 536,1309 407,1183 401:1178 379:1169 367,1169 244,1169 467,1433 633,1433"),  # U+00EA ê
    0xeb: (1048, "547,1029 638:1029 792:968 904:853 967:684 967,576 967:534 949:506 924,506 250,506 252:410 300:268 384:173 500:126 572,126 639:126 736:157 806:193 853:224 870,224 892:224 904,207 954,142 921:102 829:43 724:5 612:-14 557,-14 452:-14 275:57 146:194 74:396 74,527 74:633 139:817 261:952 437:1029;551,898 422:898 274:749 256,617 807,617 807:679 773:782 707:857 612:898;483,1289 483:1266 465:1226 433:1196 392:1178 369,1178 347:1178 307:1196 276:1226 258:1266 258,1289 258:1312 276:1354 307:1385 347:1403 369,1403 392:1403 433:1385 465:1354 483:1312;842,1289 842:1266 824:1226 793:1196 752:1178 729,1178 706:1178 665:1196 635:1226 617:1266 617,1289 617:1312 635:1354 665:1385 706:1403 729,1403 752:1403 793:1385 824:1354 842:1312"),  # U+00EB ë
    0xec: (512, "344,1013 344,0 166,0 166,1013;162,1449 195:1449 227:1428 241,1405 390,1163 288,1163 267:1163 241:1176 227,1191 -7,1449"),  # U+00EC ì
    0xed: (512, "344,1013 344,0 166,0 166,1013;552,1449 319,1191 305:1176 278:1163 257,1163 151,1163 299,1405 313:1428 346:1449 378,1449"),  # U+00ED í
    0xee: (512, "344,1013 344,0 166,0 166,1013;566,1169 447,1169 426:1169 407,1183 279,1309 262,1326 246,1309 117,1183 111:1178 89:1169 77,1169 -46,1169 177,1433 343,1433"),  # U+00EE î
    0xef: (512, "344,1013 344,0 166,0 166,1013;194,1289 194:1266 176:1226 144:1196 103:1178 80,1178 58:1178 18:1196 -13:1226 -31:1266 -31,1289 -31:1312 -13:1354 18:1385 58:1403 80,1403 103:1403 144:1385 176:1354 194:1312;553,1289 553:1266 535:1226 504:1196 463:1178 440,1178 417:1178 376:1196 346:1226 328:1266 328,1289 328:1312 346:1354 376:1385 417:1403 440,1403 463:1403 504:1385 535:1354 553:1312"),  # U+00EF ï
    0xf0: (1106, "417,1065 413:1072 408:1085 408,1091 408:1113 431,1128 534,1200 489:1220 388:1254 331,1268 313:1273 288:1300 288,1323 288:1338 293,1352 313,1414 409:1398 589:1338 670,1290 837,1412 872,1355 880:1342 880,1331 880:1310 858,1294 761,1227 821:1178 920:1054 990:899 1029:714 1029,604 1029:461 967:233 844:73 661:-13 541,-13 443:-13 273:53 148:176 76:354 76,466 76:560 138:727 254:853 419:927 523,927 623:927 800:841 865,754 845:890 728:1080 634,1144 450,1009;545,125 616:125 731:179 812:288 858:453 861,564 845:607 793:688 718:751 619:788 557,788 482:788 369:738 293:651 254:532 254,464 254:383 300:256 380:170 485:125"),  # U+00F0 ð
    0xf1: (1112, "146,0 146,1013 252,1013 290:1013 300,976 314,866 380:939 543:1029 650,1029 733:1029 860:974 945:873 989:731 989,645 989,0 811,0 811,645 811:760 706:887 598,887 519:887 382:811 324,746 324,0;675,1325 711:1325 750:1367 751,1411 859,1411 859:1364 834:1285 787:1229 722:1198 682,1198 647:1198 586:1227 532:1261 484:1290 461,1290 389:1290 387,1202 276,1202 276:1250 302:1329 350:1386 416:1417 455,1417 490:1417 551:1388 605:1354 652:1325"),  # U+00F1 ñ
    0xf2: (1112, "556,1029 667:1029 846:955 971:819 1038:626 1038,507 1038:387 971:195 846:59 667:-14 556,-14 445:-14 266:59 140:195 72:387 72,507 72:626 140:819 266:955 445:1029;556,125 706:125 854:326 854,506 854:687 706:889 556,889 480:889 368:837 293:739 256:596 256,506 256:416 293:274 368:177 480:125;458,1449 491:1449 523:1428 537,1405 686,1163 584,1163 563:1163 537:1176 523,1191 289,1449"),  # U+00F2 ò
    0xf3: (1112, "556,1029 667:1029 846:955 971:819 1038:626 1038,507 1038:387 971:195 846:59 667:-14 556,-14 445:-14 266:59 140:195 72:387 72,507 72:626 140:819 266:955 445:1029;556,125 706:125 854:326 854,506 854:687 706:889 556,889 480:889 368:837 293:739 256:596 256,506 256:416 293:274 368:177 480:125;848,1449 615,1191 601:1176 574:1163 553,1163 447,1163 595,1405 609:1428 642:1449 674,1449"),  # U+00F3 ó
    0xf4: (1112, "556,1029 667:1029 846:955 971:819 1038:626 1038,507 1038:387 971:195 846:59 667:-14 556,-14 445:-14 266:59 140:195 72:387 72,507 72:626 140:819 266:955 445:1029;556,125 706:125 854:326 854,506 854:687 706:889 556,889 480:889 368:837 293:739 256:596 256,506 256:416 293:274 368:177 480:125;863,1169 744,1169 723:1169 704,1183 576,1309 559,1326 543,1309 414,1183 408:1178 386:1169 374,1169 251,1169 474,1433 640,1433"),  # U+00F4 ô
    0xf5: (1112, "556,1029 667:1029 846:955 971:819 1038:626 1038,507 1038:387 971:195 846:59 667:-14 556,-14 445:-14 266:59 140:195 72:387 72,507 72:626 140:819 266:955 445:1029;556,125 706:125 854:326 854,506 854:687 706:889 556,889 480:889 368:837 293:739 256:596 256,506 256:416 293:274 368:177 480:125;668,1325 704:1325 743:1367 744,1411 852,1411 852:1364 827:1285 780:1229 715:1198 675,1198 640:1198 579:1227 525:1261 477:1290 454,1290 382:1290 380,1202 269,1202 269:1250 295:1329 343:1386 409:1417 448,1417 483:1417 544:1388 598:1354 645:1325"),  # U+00F5 õ
    0xf6: (1112, "556,1029 667:1029 846:955 971:819 1038:626 1038,507 1038:387 971:195 846:59 667:-14 556,-14 445:-14 266:59 140:195 72:387 72,507 72:626 140:819 266:955 445:1029;556,125 706:125 854:326 854,506 854:687 706:889 556,889 480:889 368:837 293:739 256:596 256,506 256:416 293:274 368:177 480:125;490,1289 490:1266 472:1226 440:1196 399:1178 376,1178 354:1178 314:1196 283:1226 265:1266 265,1289 265:1312 283:1354 314:1385 354:1403 376,1403 399:1403 440:1385 472:1354 490:1312;849,1289 849:1266 831:1226 800:1196 759:1178 736,1178 713:1178 672:1196 642:1226 624:1266 624,1289 624:1312 642:1354 672:1385 713:1403 736,1403 759:1403 800:1385 831:1354 849:1312"),  # U+00F6 ö
    0xf7: (1160, "100,739 1058,739 1058,604 100,604;454,1026 454:1052 473:1098 506:1132 551:1152 578,1152 604:1152 649:1132 683:1098 703:1052 703,1026 703:999 683:954 649:920 604:901 578,901 551:901 506:920 473:954 454:999;454,314 454:340 473:386 506:420 551:440 578,440 604:440 649:420 683:386 703:340 703,314 703:287 683:242 649:208 604:189 578,189 551:189 506:208 473:242 454:287"),  # U+00F7 ÷
    0xf8: (1112, "912,884 973:816 1039:625 1039,507 1039:387 972:195 847:59 668:-14 557,-14 481:-14 350:20 296,52 241,-22 219:-51 160:-76 131,-76 64,-76 209,120 143:189 73:383 73,507 73:626 141:819 267:955 446:1029 557,1029 636:1029 771:991 827,956 895,1047 915:1074 947:1097 979,1097 1069,1097;246,506 246:346 305,249 741,839 668:895 557,895 481:895 365:841 286:741 246:596;557,120 632:120 747:173 826:273 866:416 866,506 866:657 814,753 381,168 451:120"),  # U+00F8 ø
    0xf9: (1112, "300,1013 300,367 300:252 406:126 513,126 591:126 729:200 787,266 787,1013 965,1013 965,0 859,0 821:0 811,37 797,146 731:73 567:-16 461,-16 378:-16 251:39 165:139 122:281 122,367 122,1013;452,1449 485:1449 517:1428 531,1405 680,1163 578,1163 557:1163 531:1176 517,1191 283,1449"),  # U+00F9 ù
    0xfa: (1112, "300,1013 300,367 300:252 406:126 513,126 591:126 729:200 787,266 787,1013 965,1013 965,0 859,0 821:0 811,37 797,146 731:73 567:-16 461,-16 378:-16 251:39 165:139 122:281 122,367 122,1013;842,1449 609,1191 595:1176 568:1163 547,1163 441,1163 589,1405 603:1428 636:1449 668,1449"),  # U+00FA ú
    0xfb: (1112, "300,1013 300,367 300:252 406:126 513,126 591:126 729:200 787,266 787,1013 965,1013 965,0 859,0 821:0 811,37 797,146 731:73 567:-16 461,-16 378:-16 251:39 165:139 122:281 122,367 122,1013;857,1169 738,1169 717:1169 698,1183 570,1309 553,1326 537,1309 408,1183 402:1178 380:1169 368,1169 245,1169 468,1433 634,1433"),  # U+00FB û
    0xfc: (1112, "300,1013 300,367 300:252 406:126 513,126 591:126 729:200 787,266 787,1013 965,1013 965,0 859,0 821:0 811,37 797,146 731:73 567:-16 461,-16 378:-16 251:39 165:139 122:281 122,367 122,1013;484,1289 484:1266 466:1226 434:1196 393:1178 370,1178 348:1178 308:1196 277:1226 259:1266 259,1289 259:1312 277:1354 308:1385 348:1403 370,1403 393:1403 434:1385 466:1354 484:1312;843,1289 843:1266 825:1226 794:1196 753:1178 730,1178 707:1178 666:1196 636:1226 618:1266 618,1289 618:1312 636:1354 666:1385 707:1403 730,1403 753:1403 794:1385 825:1354 843:1312"),  # U+00FC ü
    0xfd: (1024, "443,-299 434:-319 407:-343 379,-343 247,-343 432,59 14,1013 168,1013 191:1013 217:990 223,976 494,338 503:316 516:272 521,249 528:272 542:316 551,339 814,976 820:992 849:1013 866,1013 1008,1013;825,1449 592,1191 578:1176 551:1163 530,1163 424,1163 572,1405 586:1428 619:1449 651,1449"),  # U+00FD ý
    0xfe: (1104, "146,-343 146,1473 324,1473 324,866 387:940 551:1029 656,1029 743:1029 885:963 985:832 1039:639 1039,513 1039:401 979:208 867:67 704:-14 602,-14 507:-14 375:55 324,118 324,-343;597,887 510:887 379:807 324,734 324,244 373:178 490:124 562,124 703:124 855:326 855,513 855:612 820:754 754:845 658:887"),  # U+00FE þ
    0xff: (1024, "443,-299 434:-319 407:-343 379,-343 247,-343 432,59 14,1013 168,1013 191:1013 217:990 223,976 494,338 503:316 516:272 521,249 528:272 542:316 551,339 814,976 820:992 849:1013 866,1013 1008,1013;467,1289 467:1266 449:1226 417:1196 376:1178 353,1178 331:1178 291:1196 260:1226 242:1266 242,1289 242:1312 260:1354 291:1385 331:1403 353,1403 376:1403 417:1385 449:1354 467:1312;826,1289 826:1266 808:1226 777:1196 736:1178 713,1178 690:1178 649:1196 619:1226 601:1266 601,1289 601:1312 619:1354 649:1385 690:1403 713,1403 736:1403 777:1385 808:1354 826:1312"),  # U+00FF ÿ
}
