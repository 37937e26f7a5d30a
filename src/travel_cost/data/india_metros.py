# travel_cost/data/india_metros.py
# Five metro regions joined hub to hub. Distances in km; x/y are canvas positions
# for renderers. Mumbai, Delhi and Bangalore are heavy-traffic regions.

INDIA_METROS = {
    "regions": [
        {
            "name": "Hyderabad",
            "congestionRange": [2, 7],
            "heavyTraffic": False,
            "hub": "hyd_paradise",
            "nodes": [
                {"id": "hyd_dilsukhnagar", "label": "Dilsukhnagar", "x": 860, "y": 520},
                {"id": "hyd_chaitanyapuri", "label": "Chaitanyapuri", "x": 780, "y": 480},
                {"id": "hyd_kothapet", "label": "Kothapet", "x": 740, "y": 540},
                {"id": "hyd_lbnagar", "label": "L.B. Nagar", "x": 940, "y": 540},
                {"id": "hyd_mehdipatnam", "label": "Mehdipatnam", "x": 520, "y": 560},
                {"id": "hyd_paradise", "label": "Parade/Paradise", "x": 610, "y": 360},
                {"id": "hyd_ameerpet", "label": "Ameerpet", "x": 420, "y": 320},
                {"id": "hyd_jubileehills", "label": "Jubilee Hills", "x": 520, "y": 260},
            ],
            "edges": [
                ["hyd_dilsukhnagar", "hyd_chaitanyapuri", 2.5],
                ["hyd_chaitanyapuri", "hyd_kothapet", 3.2],
                ["hyd_kothapet", "hyd_lbnagar", 4.0],
                ["hyd_dilsukhnagar", "hyd_lbnagar", 6.0],
                ["hyd_mehdipatnam", "hyd_ameerpet", 6.8],
                ["hyd_ameerpet", "hyd_jubileehills", 4.2],
                ["hyd_jubileehills", "hyd_paradise", 3.0],
                ["hyd_paradise", "hyd_ameerpet", 4.5],
                ["hyd_paradise", "hyd_kothapet", 12.0],
            ],
        },
        {
            "name": "Mumbai",
            "congestionRange": [5, 10],
            "heavyTraffic": True,
            "hub": "mum_mumbaiCentral",
            "nodes": [
                {"id": "mum_andheri", "label": "Andheri", "x": 180, "y": 160},
                {"id": "mum_andheriEast", "label": "Andheri East", "x": 230, "y": 220},
                {"id": "mum_mumbaiCentral", "label": "Mumbai Central", "x": 260, "y": 120},
                {"id": "mum_bandra", "label": "Bandra", "x": 220, "y": 100},
                {"id": "mum_vashi", "label": "Vashi", "x": 340, "y": 300},
            ],
            "edges": [
                ["mum_bandra", "mum_andheri", 6.0],
                ["mum_andheri", "mum_andheriEast", 4.0],
                ["mum_andheriEast", "mum_vashi", 22.0],
                ["mum_mumbaiCentral", "mum_bandra", 5.5],
                ["mum_mumbaiCentral", "mum_andheri", 7.0],
            ],
        },
        {
            "name": "Chennai",
            "congestionRange": [3, 8],
            "heavyTraffic": False,
            "hub": "che_guindy",
            "nodes": [
                {"id": "che_tnag", "label": "T. Nagar", "x": 980, "y": 220},
                {"id": "che_guindy", "label": "Guindy", "x": 980, "y": 300},
                {"id": "che_velachery", "label": "Velachery", "x": 1040, "y": 340},
                {"id": "che_marina", "label": "Marina Beach", "x": 930, "y": 120},
            ],
            "edges": [
                ["che_tnag", "che_guindy", 6.0],
                ["che_guindy", "che_velachery", 8.0],
                ["che_marina", "che_tnag", 5.0],
            ],
        },
        {
            "name": "Delhi",
            "congestionRange": [6, 10],
            "heavyTraffic": True,
            "hub": "del_cp",
            "nodes": [
                {"id": "del_cp", "label": "Connaught Place", "x": 620, "y": 80},
                {"id": "del_karol", "label": "Karol Bagh", "x": 560, "y": 120},
                {"id": "del_dwarka", "label": "Dwarka", "x": 500, "y": 240},
                {"id": "del_rajouri", "label": "Rajouri Garden", "x": 520, "y": 160},
            ],
            "edges": [
                ["del_cp", "del_karol", 4.0],
                ["del_karol", "del_rajouri", 6.0],
                ["del_rajouri", "del_dwarka", 10.0],
            ],
        },
        {
            "name": "Bangalore",
            "congestionRange": [5, 9],
            "heavyTraffic": True,
            "hub": "blr_majestic",
            "nodes": [
                {"id": "blr_majestic", "label": "Majestic", "x": 420, "y": 520},
                {"id": "blr_mgroad", "label": "MG Road", "x": 480, "y": 460},
                {"id": "blr_indiranagar", "label": "Indiranagar", "x": 520, "y": 520},
                {"id": "blr_whitefield", "label": "Whitefield", "x": 600, "y": 560},
            ],
            "edges": [
                ["blr_majestic", "blr_mgroad", 4.5],
                ["blr_mgroad", "blr_indiranagar", 3.8],
                ["blr_indiranagar", "blr_whitefield", 12.0],
            ],
        },
    ],
    "interRegionEdges": [
        ["hyd_paradise", "mum_mumbaiCentral", 710],
        ["hyd_paradise", "blr_majestic", 570],
        ["hyd_paradise", "che_guindy", 630],
        ["hyd_paradise", "del_cp", 1420],
        ["mum_mumbaiCentral", "blr_majestic", 980],
        ["mum_mumbaiCentral", "del_cp", 1400],
        ["mum_mumbaiCentral", "che_guindy", 1330],
        ["blr_majestic", "che_guindy", 350],
        ["blr_majestic", "del_cp", 2150],
        ["che_guindy", "del_cp", 2180],
    ],
}
